"""Pytest configuration for the marketplace front end.

Django is configured once before collection. Nothing talks to a real data
service: ``FakeHttp`` stands in for the ``requests.Session`` inside
``ApiClient`` and answers from canned routes.
"""

import copy
import json
import os

import django
import pytest
import requests

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "market_place.settings")

BASE_URL = "http://api.test"

USER = {"_id": "user-1", "email": "peter@abv.bg", "accessToken": "token-1"}
OTHER_USER = {"_id": "user-2", "email": "george@abv.bg", "accessToken": "token-2"}


def pytest_configure(config):
    django.setup()

    from django.test.utils import setup_test_environment

    setup_test_environment()


class FakeResponse:
    """Just enough of ``requests.Response`` for ApiClient and the services."""

    def __init__(self, status_code=200, body=None, url=""):
        self.status_code = status_code
        self._body = body
        self.url = url

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        if isinstance(self._body, str):
            return json.loads(self._body)
        return copy.deepcopy(self._body)


class FakeHttp:
    """
    Records every request and replays responses registered with ``add``.

    Several responses for the same route are served in order; the last one
    repeats. Unknown routes answer 404.
    """

    def __init__(self):
        self.calls = []
        self.routes = {}

    def add(self, method, path, status=200, body=None, exc=None):
        self.routes.setdefault((method, path), []).append((status, body, exc))
        return self

    def fail(self, method, path):
        return self.add(method, path, exc=requests.ConnectionError("connection refused"))

    def request(self, method, url, headers=None, json=None, params=None, timeout=None):
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        self.calls.append({
            "method": method,
            "path": path,
            "headers": dict(headers or {}),
            "json": copy.deepcopy(json),
            "params": params,
            "timeout": timeout,
        })

        queue = self.routes.get((method, path))
        if not queue:
            return FakeResponse(404, {"code": 404, "message": "Resource not found"}, url)

        status, body, exc = queue.pop(0) if len(queue) > 1 else queue[0]
        if exc is not None:
            raise exc
        return FakeResponse(status, body, url)

    def calls_to(self, method, path):
        return [c for c in self.calls if c["method"] == method and c["path"] == path]


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def api(http):
    from marketplace.api_client import ApiClient

    return ApiClient(base_url=BASE_URL, http=http, timeout=5)


@pytest.fixture
def storage():
    from marketplace.storage import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def store(storage, api):
    from marketplace.session import SessionStore

    return SessionStore(storage, api)


@pytest.fixture
def logged_in(store, storage):
    """A store restored from a saved user, without any network call."""
    storage.set_item("user", json.dumps(USER))
    store.restore(validate=False)
    return store


@pytest.fixture
def web(monkeypatch, api):
    """Django test client whose requests reach the fake data service."""
    from django.test import Client

    from marketplace import api_client

    monkeypatch.setattr(api_client, "get_client", lambda: api)
    return Client()


@pytest.fixture
def web_user(web, http):
    """Test client signed in as ``USER`` through the login page."""
    http.add("POST", "/users/login", 200, USER)
    response = web.post("/login/", {"email": USER["email"], "password": "Secret1"})
    assert response.status_code == 302
    http.calls.clear()
    return web


def listing(listing_id, owner_id=USER["_id"], **fields):
    data = {
        "_id": listing_id,
        "_ownerId": owner_id,
        "title": f"Listing {listing_id}",
        "description": "A thing for sale",
        "price": 100,
        "category": "Electronics",
        "imageUrl": "",
        "likes": [],
        "_createdOn": 1700000000000,
    }
    data.update(fields)
    return data
