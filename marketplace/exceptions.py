# marketplace/exceptions.py
"""
Failures surfaced by the session store and the resource services.

Views catch ``MarketplaceError`` and show ``str(exc)`` as a flash message;
nothing here is fatal, the user can always retry.
"""


class MarketplaceError(Exception):
    default_message = "Something went wrong. Please try again."

    def __init__(self, message=None, status=None):
        self.message = message or self.default_message
        self.status = status
        super().__init__(self.message)


class Unauthenticated(MarketplaceError):
    """No session; raised before any request is sent."""
    default_message = "User must be authenticated"


class ValidationError(MarketplaceError):
    """Bad local input; never reaches the network."""
    default_message = "Invalid data"

    def __init__(self, errors, status=None):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors) or [self.default_message]
        super().__init__("; ".join(self.errors), status=status)


class AuthFailed(MarketplaceError):
    """Stale or rejected token. Callers send the user back to the login page."""
    default_message = "Authentication failed. Please log in again."


class NotFound(MarketplaceError):
    default_message = "Not found"


class Forbidden(MarketplaceError):
    default_message = "You do not have permission to do that"


class ServerError(MarketplaceError):
    default_message = "Server error"


class NetworkError(MarketplaceError):
    default_message = "Could not reach the server. Please check your connection."
