# marketplace/favorites.py
"""
Favorites kept in local storage, one JSON array of listing ids per user.

Several people can share a browser, so the key carries the user id.
None of these functions raise: an empty id is a no-op and unreadable data
reads as "no favorites".
"""
import json
import logging

from marketplace.constants import FAVORITES_KEY_PREFIX

logger = logging.getLogger(__name__)


def favorites_key(user_id):
    return f"{FAVORITES_KEY_PREFIX}{user_id}"


def _read(storage, user_id):
    raw = storage.get_item(favorites_key(user_id))
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed favorites for user %s", user_id)
        return []
    if not isinstance(data, list):
        return []

    ids = []
    for listing_id in data:
        if isinstance(listing_id, str) and listing_id and listing_id not in ids:
            ids.append(listing_id)
    return ids


def _write(storage, user_id, ids):
    storage.set_item(favorites_key(user_id), json.dumps(ids))


def get_favorites(storage, user_id):
    """Return the set of listing ids ``user_id`` has favorited."""
    if not user_id:
        return set()
    return set(_read(storage, user_id))


def is_favorite(storage, user_id, listing_id):
    if not user_id or not listing_id:
        return False
    return listing_id in _read(storage, user_id)


def add_favorite(storage, user_id, listing_id):
    if not user_id or not listing_id:
        return
    ids = _read(storage, user_id)
    if listing_id not in ids:
        ids.append(listing_id)
    _write(storage, user_id, ids)


def remove_favorite(storage, user_id, listing_id):
    if not user_id or not listing_id:
        return
    ids = [i for i in _read(storage, user_id) if i != listing_id]
    _write(storage, user_id, ids)


def toggle_favorite(storage, user_id, listing_id):
    """
    Flip membership of ``listing_id``.
    Returns True if it was added, False if it was removed (or ids were empty).
    """
    if not user_id or not listing_id:
        return False

    if is_favorite(storage, user_id, listing_id):
        remove_favorite(storage, user_id, listing_id)
        return False
    add_favorite(storage, user_id, listing_id)
    return True


def clear_favorites(storage, user_id):
    if not user_id:
        return
    storage.remove_item(favorites_key(user_id))
