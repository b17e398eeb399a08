# marketplace/services/seed.py
"""
Development-only: fill an empty data service with sample listings.

Runs once per storage: the seed flag is set after a successful run or when
the service already has enough listings.
"""
import logging

from marketplace.api_client import read_json
from marketplace.constants import SEED_FLAG_KEY, SEED_MIN_LISTINGS
from marketplace.exceptions import MarketplaceError
from marketplace.services.listings import ListingService

logger = logging.getLogger(__name__)

SEED_LISTINGS = [
    {
        "title": "iPhone 13 Pro - 128GB",
        "description": "Graphite, unlocked, battery health 91%. Comes with the original box and a case.",
        "price": 650,
        "category": "Electronics",
        "imageUrl": "https://images.unsplash.com/photo-1632661674596-df8be070a5c5",
    },
    {
        "title": "2015 Toyota Corolla",
        "description": "One owner, 120,000 km, full service history. New tyres last spring.",
        "price": 9800,
        "category": "Vehicles",
        "imageUrl": "https://images.unsplash.com/photo-1623869675781-80aa31012a5a",
    },
    {
        "title": "Studio apartment near the university",
        "description": "28 m2, furnished, fourth floor with elevator. Available from next month.",
        "price": 85000,
        "category": "Real Estate",
        "imageUrl": "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688",
    },
    {
        "title": "Solid oak dining table",
        "description": "Seats six, 180 x 90 cm. Small scratch on one leg, otherwise like new.",
        "price": 320,
        "category": "Furniture",
        "imageUrl": "https://images.unsplash.com/photo-1617806118233-18e1de247200",
    },
    {
        "title": "Winter jacket, size M",
        "description": "Down filled, worn twice. Dark green.",
        "price": 60,
        "category": "Clothing",
        "imageUrl": "https://images.unsplash.com/photo-1544923246-77307dd654cb",
    },
    {
        "title": "Acoustic guitar with gig bag",
        "description": "Full size dreadnought, new strings, great for beginners.",
        "price": 120,
        "category": "Other",
        "imageUrl": "https://images.unsplash.com/photo-1510915361894-db8b60106cb1",
    },
]


def seed_database(session_store, storage, listings=None):
    """
    Returns the number of listings created (0 when skipped).
    Failures are logged, never raised: seeding must not block the app.
    """
    if storage.get_item(SEED_FLAG_KEY):
        logger.info("Seed flag set, skipping")
        return 0
    if not session_store.is_authenticated:
        logger.info("No session, skipping seed")
        return 0

    client = session_store.client
    try:
        response = client.get("/data/listings")
    except MarketplaceError as e:
        logger.error("Failed to seed database: %s", e)
        return 0

    if not 200 <= response.status_code < 300:
        logger.warning("Server not ready for seeding: %s", response.status_code)
        return 0

    existing = read_json(response)
    if not isinstance(existing, list):
        logger.warning("Invalid listings data format")
        return 0

    if len(existing) >= SEED_MIN_LISTINGS:
        storage.set_item(SEED_FLAG_KEY, "true")
        return 0

    service = ListingService(session_store)
    created = 0
    for data in listings if listings is not None else SEED_LISTINGS:
        try:
            service.create_listing(data)
            created += 1
        except MarketplaceError as e:
            logger.error("Failed to seed listing %r: %s", data.get("title"), e)

    storage.set_item(SEED_FLAG_KEY, "true")
    logger.info("Database seeded with %s sample listings", created)
    return created
