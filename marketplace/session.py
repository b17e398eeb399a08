# marketplace/session.py
"""
The signed-in user of the current browser.

One ``SessionStore`` is built per request by ``MarketplaceSessionMiddleware``
and handed to views as ``request.session_store``. The full user object
(including ``accessToken``) is kept under the ``user`` key of local storage;
every change rewrites the whole object with a single ``set_item``.
"""
import json
import logging

from marketplace.api_client import read_json
from marketplace.constants import USER_KEY
from marketplace.exceptions import (
    AuthFailed,
    MarketplaceError,
    NetworkError,
    Unauthenticated,
)

logger = logging.getLogger(__name__)

LOGIN_FAILED = "Login failed. Please check your credentials."
REGISTER_FAILED = "Registration failed. Email may already be in use."


def user_id(user):
    if not user:
        return None
    return user.get("_id") or user.get("id")


def normalize_user(data):
    user = dict(data)
    uid = user_id(user)
    if uid:
        user["_id"] = uid
        user["id"] = uid
    return user


class SessionStore:
    def __init__(self, storage, client):
        self.storage = storage
        self.client = client
        self._user = None
        self.loading = True

    # ------------------------------------------------------------------
    # state
    # ------------------------------------------------------------------
    @property
    def user(self):
        return self._user

    @property
    def user_id(self):
        return user_id(self._user)

    @property
    def token(self):
        return self._user.get("accessToken") if self._user else None

    @property
    def is_authenticated(self):
        return bool(self.token)

    def require_user(self):
        if not self.is_authenticated:
            raise Unauthenticated()
        return self._user

    def _store(self, user):
        self._user = normalize_user(user)
        self.storage.set_item(USER_KEY, json.dumps(self._user))
        return self._user

    def clear(self):
        """Forget the user locally (no remote call)."""
        self._user = None
        self.storage.remove_item(USER_KEY)

    # ------------------------------------------------------------------
    # startup
    # ------------------------------------------------------------------
    def restore(self, validate=True):
        """
        Load the persisted user. With ``validate`` the token is checked
        against ``/users/me``:
        - 4xx: the service rejected it, the session is cleared
        - network failure / 5xx: keep the cached identity
        """
        try:
            raw = self.storage.get_item(USER_KEY)
            if not raw:
                return None

            try:
                cached = json.loads(raw)
            except ValueError:
                logger.warning("Stored user is not valid JSON, clearing it")
                self.clear()
                return None

            if not isinstance(cached, dict) or not cached.get("accessToken"):
                self.clear()
                return None

            self._user = normalize_user(cached)
            if validate:
                self._revalidate()
            return self._user
        finally:
            self.loading = False

    def _revalidate(self):
        try:
            response = self.client.get("/users/me", token=self.token)
        except NetworkError:
            logger.info("Token check skipped (offline), keeping cached user")
            return

        status = response.status_code
        if 400 <= status < 500:
            logger.warning("Token rejected (%s), clearing session", status)
            self.clear()
            return
        if status >= 500:
            logger.warning("Token check failed (%s), keeping cached user", status)
            return

        fresh = read_json(response)
        if isinstance(fresh, dict) and fresh:
            # /users/me never echoes the token
            self._store({**self._user, **fresh, "accessToken": self.token})

    # ------------------------------------------------------------------
    # auth
    # ------------------------------------------------------------------
    def _authenticate(self, path, email, password, failure_message):
        response = self.client.post(path, json={"email": email, "password": password})
        if not 200 <= response.status_code < 300:
            # server detail stays in the log, never in the UI
            logger.info("%s rejected with %s", path, response.status_code)
            raise AuthFailed(failure_message, response.status_code)

        data = read_json(response)
        if not isinstance(data, dict) or not data.get("accessToken"):
            logger.error("%s returned no access token", path)
            raise AuthFailed(failure_message, response.status_code)
        return self._store(data)

    def login(self, email, password):
        try:
            return self._authenticate("/users/login", email, password, LOGIN_FAILED)
        except NetworkError as e:
            raise AuthFailed(LOGIN_FAILED) from e

    def register(self, email, password):
        try:
            return self._authenticate("/users/register", email, password, REGISTER_FAILED)
        except NetworkError as e:
            raise AuthFailed(REGISTER_FAILED) from e

    def logout(self):
        token = self.token
        if token:
            try:
                self.client.get("/users/logout", token=token)
            except MarketplaceError as e:
                logger.info("Remote logout failed: %s", e)
        self.clear()

    def update_user(self, patch):
        """Merge ``patch`` into the stored user (after a profile edit)."""
        if self._user is None:
            raise Unauthenticated()
        return self._store({**self._user, **patch})
