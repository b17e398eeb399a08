# marketplace/api_permissions.py
from rest_framework.authentication import SessionAuthentication
from rest_framework.permissions import BasePermission


class MarketplaceSessionAuthentication(SessionAuthentication):
    """
    Identity comes from the signed session cookie (see MarketplaceSessionMiddleware),
    so unsafe methods need a valid CSRF token, same as the HTML forms.
    """

    def authenticate(self, request):
        store = getattr(request._request, "session_store", None)
        if store is None or not store.is_authenticated:
            return None

        self.enforce_csrf(request)
        return (store.user, store.token)


class HasMarketplaceSession(BasePermission):
    message = "Please login to like listings"

    def has_permission(self, request, view):
        store = getattr(request, "session_store", None)
        return bool(store is not None and store.is_authenticated)
