# marketplace/api_client.py
"""
Thin wrapper around ``requests`` for the remote data service.

Every call goes through ``ApiClient.request`` so the auth header, timeout and
error mapping live in one place. Nothing is retried: a failed call is final
and the user retries from the page.
"""
import logging

import requests
from django.conf import settings

from marketplace.exceptions import (
    AuthFailed,
    Forbidden,
    NetworkError,
    NotFound,
    ServerError,
)

logger = logging.getLogger(__name__)

AUTH_HEADER = "X-Authorization"


def read_json(response, default=None):
    """Best-effort body parse; anything that isn't JSON yields ``default``."""
    try:
        return response.json()
    except ValueError:
        return default


def error_message(response, fallback):
    body = read_json(response, {})
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return fallback


class ApiClient:
    def __init__(self, base_url=None, http=None, timeout=None):
        self.base_url = (base_url or settings.MARKETPLACE_API_URL).rstrip("/")
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout or settings.MARKETPLACE_REQUEST_TIMEOUT

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method, path, *, token=None, json=None, params=None):
        headers = {}
        if token:
            headers[AUTH_HEADER] = token
        if json is not None:
            headers["Content-Type"] = "application/json"

        try:
            response = self.http.request(
                method,
                self.url(path),
                headers=headers,
                json=json,
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("network error: %s %s: %s", method, path, e)
            raise NetworkError() from e

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    def get(self, path, **kwargs):
        return self.request("GET", path, **kwargs)

    def post(self, path, **kwargs):
        return self.request("POST", path, **kwargs)

    def put(self, path, **kwargs):
        return self.request("PUT", path, **kwargs)

    def delete(self, path, **kwargs):
        return self.request("DELETE", path, **kwargs)

    def check(
        self,
        response,
        *,
        not_found=None,
        forbidden=None,
        unavailable=None,
        mutation=False,
        fallback="Server error",
    ):
        """
        Return ``response`` if it is 2xx, otherwise raise the matching error.

        - unavailable: message for 404/405 on endpoints the service may not
          implement (profile updates)
        - not_found / forbidden: messages for 404 / 403
        - mutation: a bare 401/403 means the token is stale -> AuthFailed
        """
        status = response.status_code
        if 200 <= status < 300:
            return response

        logger.error("remote error: %s -> %s", getattr(response, "url", ""), status)

        if unavailable and status in (404, 405):
            raise ServerError(unavailable, status)
        if status == 404:
            raise NotFound(not_found, status)
        if status == 403 and forbidden:
            raise Forbidden(forbidden, status)
        if status == 401 or (status == 403 and mutation):
            raise AuthFailed(status=status)
        if status == 403:
            raise Forbidden(status=status)

        raise ServerError(error_message(response, f"{fallback} ({status})"), status)


_client = None


def get_client():
    """Process-wide client; one ``requests.Session`` keeps connections pooled."""
    global _client
    if _client is None:
        _client = ApiClient()
    return _client
