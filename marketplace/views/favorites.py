from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from marketplace.decorators import session_required
from marketplace.exceptions import MarketplaceError
from marketplace.favorites import get_favorites, toggle_favorite
from marketplace.services.listings import ListingService
from marketplace.views.helpers import _safe_next


@session_required("Please login to view your favorites")
def my_favorites(request):
    store = request.session_store
    favorite_ids = get_favorites(request.local_storage, store.user_id)

    try:
        listings = ListingService(store).fetch_listings_by_ids(favorite_ids)
    except MarketplaceError:
        messages.error(request, "Failed to load favorites")
        listings = []

    for listing in listings:
        listing["is_favorited"] = True

    return render(request, "favorites.html", {"listings": listings})


@require_POST
def toggle_listing_favorite(request, listing_id):
    store = request.session_store
    if not store.is_authenticated:
        messages.error(request, "Please login to like listings")
        return redirect("login")

    added = toggle_favorite(request.local_storage, store.user_id, listing_id)
    messages.success(request, "Added to favorites" if added else "Removed from favorites")
    return redirect(_safe_next(request, reverse("listing_detail", kwargs={"listing_id": listing_id})))
