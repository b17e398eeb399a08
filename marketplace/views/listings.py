import logging

from django.contrib import messages
from django.core.paginator import Paginator
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from marketplace.constants import LISTING_CATEGORIES, LISTINGS_PER_PAGE
from marketplace.decorators import session_required
from marketplace.exceptions import AuthFailed, MarketplaceError, NotFound, Unauthenticated
from marketplace.favorites import get_favorites, is_favorite
from marketplace.forms import CommentForm, ListingForm
from marketplace.services.comments import CommentService
from marketplace.services.listings import ListingService, filter_listings
from marketplace.views.helpers import (
    _auth_redirect,
    _first_form_error,
    _handle_error,
    _is_owner,
    _safe_next,
)

logger = logging.getLogger(__name__)


def catalog(request):
    store = request.session_store
    q = request.GET.get("q", "").strip()
    category = request.GET.get("category", "").strip()
    if category not in LISTING_CATEGORIES:
        category = ""

    try:
        listings = ListingService(store).fetch_listings()
    except MarketplaceError:
        messages.error(request, "Failed to load listings")
        listings = []

    filtered = filter_listings(listings, search=q, category=category)

    paginator = Paginator(filtered, LISTINGS_PER_PAGE)
    page_obj = paginator.get_page(request.GET.get("page"))

    favorite_ids = get_favorites(request.local_storage, store.user_id)
    for listing in page_obj:
        listing["is_favorited"] = listing.get("id") in favorite_ids

    return render(request, "catalog.html", {
        "page_obj": page_obj,
        "q": q,
        "selected_category": category,
        "total": len(filtered),
    })


def listing_detail(request, listing_id):
    store = request.session_store
    try:
        listing = ListingService(store).fetch_listing(listing_id)
    except NotFound as e:
        messages.error(request, e.message)
        return redirect("catalog")
    except MarketplaceError:
        messages.error(request, "Failed to load listing")
        return redirect("catalog")

    comments = CommentService(store).fetch_comments(listing_id)
    for comment in comments:
        comment["can_delete"] = _is_owner(store, comment)

    return render(request, "listing_detail.html", {
        "listing": listing,
        "comments": comments,
        "comment_form": CommentForm(),
        "is_owner": _is_owner(store, listing),
        "is_favorited": is_favorite(request.local_storage, store.user_id, listing_id),
    })


@session_required("Please login to create listings")
def create_listing(request):
    store = request.session_store

    if request.method == "POST":
        form = ListingForm(request.POST, request.FILES)
        if form.is_valid():
            try:
                listing = ListingService(store).create_listing(form.to_listing_data())
            except (AuthFailed, Unauthenticated) as e:
                return _auth_redirect(request, e)
            except MarketplaceError as e:
                messages.error(request, e.message)
            else:
                messages.success(request, "Listing created successfully!")
                return redirect("listing_detail", listing_id=listing["id"])
        else:
            messages.error(request, _first_form_error(form))
    else:
        form = ListingForm()

    return render(request, "listing_form.html", {"form": form, "is_edit": False})


@session_required("Please login to edit listings")
def edit_listing(request, listing_id):
    store = request.session_store
    service = ListingService(store)

    try:
        listing = service.fetch_listing(listing_id)
    except MarketplaceError:
        messages.error(request, "Failed to load listing")
        return redirect("catalog")

    if not _is_owner(store, listing):
        messages.error(request, "You can only edit your own listings")
        return redirect("catalog")

    if request.method == "POST":
        form = ListingForm(request.POST, request.FILES)
        if form.is_valid():
            data = form.to_listing_data()
            if not data["imageUrl"]:
                data["imageUrl"] = listing.get("imageUrl") or ""
            data["likes"] = listing["likes"]
            try:
                service.update_listing(listing_id, data)
            except (AuthFailed, Unauthenticated) as e:
                return _auth_redirect(request, e)
            except MarketplaceError as e:
                messages.error(request, e.message)
            else:
                messages.success(request, "Listing updated successfully!")
                return redirect("my_listings")
        else:
            messages.error(request, _first_form_error(form))
    else:
        form = ListingForm(initial=ListingForm.initial_from_listing(listing))

    return render(request, "listing_form.html", {"form": form, "is_edit": True, "listing": listing})


@require_POST
@session_required("Please login to delete listings")
def delete_listing(request, listing_id):
    try:
        ListingService(request.session_store).delete_listing(listing_id)
    except MarketplaceError as e:
        return _handle_error(request, e, "listing_detail", listing_id=listing_id)

    messages.success(request, "Listing deleted successfully")
    return redirect(_safe_next(request, "catalog"))


@session_required("Please login to view your listings")
def my_listings(request):
    try:
        listings = ListingService(request.session_store).fetch_my_listings()
    except (AuthFailed, Unauthenticated) as e:
        return _auth_redirect(request, e)
    except MarketplaceError:
        messages.error(request, "Failed to load your listings")
        listings = []

    return render(request, "my_listings.html", {"listings": listings})
