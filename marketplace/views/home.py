from django.shortcuts import render

from marketplace.constants import LATEST_LISTINGS_COUNT
from marketplace.exceptions import MarketplaceError
from marketplace.services.listings import ListingService


def home(request):
    # the home page still renders when the data service is down
    try:
        listings = ListingService(request.session_store).fetch_listings()
    except MarketplaceError:
        listings = []

    latest = list(reversed(listings))[:LATEST_LISTINGS_COUNT]
    return render(request, "home.html", {"latest_listings": latest})
