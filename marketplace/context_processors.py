from marketplace.constants import LISTING_CATEGORIES
from marketplace.favorites import get_favorites


def navbar_counters(request):
    """
    Top bar data:
    - current_user / is_authenticated
    - favorite_count
    - categories (for the search form)
    """
    store = getattr(request, "session_store", None)
    if store is None or not store.is_authenticated:
        return {
            "current_user": None,
            "is_authenticated": False,
            "favorite_count": 0,
            "categories": LISTING_CATEGORIES,
        }

    return {
        "current_user": store.user,
        "is_authenticated": True,
        "favorite_count": len(get_favorites(request.local_storage, store.user_id)),
        "categories": LISTING_CATEGORIES,
    }
