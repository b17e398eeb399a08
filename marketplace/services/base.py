# marketplace/services/base.py
from contextlib import contextmanager
from datetime import datetime, timezone

from marketplace.exceptions import MarketplaceError


def _timestamp(value):
    # the service stamps records with epoch milliseconds
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def normalize_resource(data):
    """
    Copy a service record and expose ``_id``/``_ownerId``/``_createdOn`` as
    ``id``/``ownerId``/``created_on`` (templates cannot read underscore keys).
    """
    item = dict(data)
    if item.get("_id"):
        item["id"] = item["_id"]
    if item.get("_ownerId"):
        item["ownerId"] = item["_ownerId"]
    item["created_on"] = _timestamp(item.get("_createdOn"))
    return item


def normalize_listing(data):
    listing = normalize_resource(data)
    likes = listing.get("likes")
    listing["likes"] = list(likes) if isinstance(likes, list) else []
    return listing


def as_list(data):
    """Coerce a payload to a list of records; anything else becomes []."""
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, dict)]


class ResourceService:
    """
    Shared state for the resource services:
    - loading: True while a call is in flight
    - last_error: message of the last failed call (None after a success)
    Both are reset when a call starts.
    """

    def __init__(self, session_store, client=None):
        self.session_store = session_store
        self.client = client if client is not None else session_store.client
        self.loading = False
        self.last_error = None

    @contextmanager
    def _call(self):
        self.loading = True
        self.last_error = None
        try:
            yield
        except MarketplaceError as e:
            self.last_error = e.message
            raise
        finally:
            self.loading = False

    def _token(self):
        self.session_store.require_user()
        return self.session_store.token
