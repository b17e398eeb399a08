# marketplace/services/comments.py
import logging

from marketplace.api_client import read_json
from marketplace.exceptions import MarketplaceError, ServerError
from marketplace.services.base import ResourceService, as_list, normalize_resource
from marketplace.validators import require_text

logger = logging.getLogger(__name__)


class CommentService(ResourceService):

    def fetch_comments(self, listing_id):
        """
        Comments of one listing, oldest first as the service returns them.
        Never raises: a failure leaves ``last_error`` set and returns [].
        """
        if not isinstance(listing_id, str) or not listing_id.strip():
            logger.warning("fetch_comments called without a listing id")
            return []

        try:
            with self._call():
                response = self.client.get(
                    "/data/comments",
                    params={"where": f'listingId="{listing_id.strip()}"'},
                )
                if response.status_code == 404:
                    # the collection doesn't exist until the first comment
                    return []
                self.client.check(response, fallback="Failed to load comments")
                return [normalize_resource(c) for c in as_list(read_json(response))]
        except MarketplaceError as e:
            logger.warning("Failed to load comments for %s: %s", listing_id, e)
            return []

    def create_comment(self, listing_id, text):
        with self._call():
            token = self._token()
            listing_id = require_text(listing_id, "Invalid listing ID")
            text = require_text(text, "Comment text is required")

            response = self.client.check(
                self.client.post(
                    "/data/comments",
                    json={
                        "listingId": listing_id,
                        "text": text,
                        "authorEmail": self.session_store.user.get("email"),
                    },
                    token=token,
                ),
                mutation=True,
                fallback="Failed to post comment",
            )
            comment = read_json(response)
            if not isinstance(comment, dict):
                raise ServerError("Failed to post comment", response.status_code)
            return normalize_resource(comment)

    def delete_comment(self, comment_id):
        with self._call():
            token = self._token()
            comment_id = require_text(comment_id, "Invalid comment ID")
            self.client.check(
                self.client.delete(f"/data/comments/{comment_id}", token=token),
                not_found="Comment not found",
                forbidden="You do not have permission to delete this comment",
                mutation=True,
                fallback="Failed to delete comment",
            )
            return True
