from django.conf import settings

LISTING_CATEGORIES = [
    "Electronics",
    "Vehicles",
    "Real Estate",
    "Furniture",
    "Clothing",
    "Other",
]
DEFAULT_CATEGORY = "Other"

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 5000
MAX_PRICE = 1_000_000_000
MIN_PASSWORD_LENGTH = 6

LISTINGS_PER_PAGE = 6   # catalog: 2 columns x 3 rows
LATEST_LISTINGS_COUNT = 3

MAX_IMAGE_SIZE = getattr(settings, "MARKETPLACE_MAX_IMAGE_SIZE", 5 * 1024 * 1024)

# storage keys
USER_KEY = "user"
FAVORITES_KEY_PREFIX = "favorites_"
SEED_FLAG_KEY = "marketplace_data_seeded"

SEED_MIN_LISTINGS = 5
