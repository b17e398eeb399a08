# marketplace/services/listings.py
import logging

from marketplace.api_client import read_json
from marketplace.exceptions import ServerError
from marketplace.services.base import ResourceService, as_list, normalize_listing
from marketplace.validators import require_text, validate_listing_data

logger = logging.getLogger(__name__)

INVALID_LISTING = "Invalid listing data received from server"


def filter_listings(listings, search=None, category=None):
    """Catalog filter: exact category, case-insensitive search in title/description."""
    result = listings
    if category:
        result = [l for l in result if l.get("category") == category]

    term = (search or "").strip().lower()
    if term:
        result = [
            l for l in result
            if term in str(l.get("title") or "").lower()
            or term in str(l.get("description") or "").lower()
        ]
    return result


class ListingService(ResourceService):

    def _listing_from(self, response):
        data = read_json(response)
        if not isinstance(data, dict) or not (data.get("_id") or data.get("id")):
            raise ServerError(INVALID_LISTING, response.status_code)
        return normalize_listing(data)

    # ----------------------------------------
    # reads
    # ----------------------------------------
    def fetch_listings(self):
        with self._call():
            response = self.client.check(
                self.client.get("/data/listings"),
                fallback="Failed to load listings",
            )
            data = read_json(response)
            if not isinstance(data, list):
                logger.warning("Invalid listings payload: %s", type(data).__name__)
                return []
            return [normalize_listing(item) for item in as_list(data)]

    def fetch_listing(self, listing_id):
        with self._call():
            listing_id = require_text(listing_id, "Invalid listing ID")
            response = self.client.check(
                self.client.get(f"/data/listings/{listing_id}"),
                not_found="Listing not found",
                fallback="Failed to load listing",
            )
            return self._listing_from(response)

    def fetch_my_listings(self):
        with self._call():
            token = self._token()
            owner_id = self.session_store.user_id
            response = self.client.check(
                self.client.get(
                    "/data/listings",
                    params={"where": f'_ownerId="{owner_id}"'},
                    token=token,
                ),
                fallback="Failed to load your listings",
            )
            return [normalize_listing(item) for item in as_list(read_json(response))]

    def fetch_listings_by_ids(self, listing_ids):
        """Listings whose id is in ``listing_ids`` (used by the favorites page)."""
        wanted = set(listing_ids or ())
        if not wanted:
            return []
        return [l for l in self.fetch_listings() if l.get("id") in wanted]

    # ----------------------------------------
    # writes
    # ----------------------------------------
    def create_listing(self, data):
        with self._call():
            token = self._token()
            payload = validate_listing_data(data)
            payload["likes"] = []

            response = self.client.check(
                self.client.post("/data/listings", json=payload, token=token),
                mutation=True,
                fallback="Failed to create listing",
            )
            listing = self._listing_from(response)
            logger.info("Listing %s created by %s", listing["id"], self.session_store.user_id)
            return listing

    def update_listing(self, listing_id, data):
        with self._call():
            token = self._token()
            listing_id = require_text(listing_id, "Invalid listing ID")
            payload = validate_listing_data(data)
            likes = data.get("likes")
            payload["likes"] = list(likes) if isinstance(likes, list) else []

            response = self.client.check(
                self.client.put(f"/data/listings/{listing_id}", json=payload, token=token),
                not_found="Listing not found",
                mutation=True,
                fallback="Failed to update listing",
            )
            return self._listing_from(response)

    def delete_listing(self, listing_id):
        with self._call():
            token = self._token()
            listing_id = require_text(listing_id, "Invalid listing ID")
            self.client.check(
                self.client.delete(f"/data/listings/{listing_id}", token=token),
                not_found="Listing not found",
                forbidden="You do not have permission to delete this listing",
                mutation=True,
                fallback="Failed to delete listing",
            )
            logger.info("Listing %s deleted by %s", listing_id, self.session_store.user_id)
            return True
