# marketplace/middleware.py
from django.conf import settings
from django.utils.functional import SimpleLazyObject

from marketplace import api_client
from marketplace.session import SessionStore
from marketplace.storage import SessionStorage


def get_session_store(request):
    if not hasattr(request, "_cached_session_store"):
        store = SessionStore(request.local_storage, api_client.get_client())
        store.restore(validate=getattr(settings, "MARKETPLACE_REVALIDATE_SESSION", False))
        request._cached_session_store = store
    return request._cached_session_store


class MarketplaceSessionMiddleware:
    """
    Gives every request its browser-scoped state:
    - request.local_storage: key/value store over the signed session cookie
    - request.session_store: the signed-in user (restored lazily)

    Must come after SessionMiddleware.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.local_storage = SessionStorage(request.session)
        request.session_store = SimpleLazyObject(lambda: get_session_store(request))
        return self.get_response(request)
