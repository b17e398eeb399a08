import json

import pytest

from marketplace.exceptions import ServerError, Unauthenticated, ValidationError
from marketplace.services.profile import ProfileService


@pytest.fixture
def service(logged_in):
    return ProfileService(logged_in)


def test_fetch_profile(service, http):
    http.add("GET", "/users/me", 200, {"_id": "user-1", "email": "peter@abv.bg"})
    assert service.fetch_profile()["id"] == "user-1"


def test_update_email_updates_session(service, storage, http):
    http.add("PUT", "/users/me", 200, {"_id": "user-1", "email": "new@abv.bg"})

    service.update_email(" new@abv.bg ")

    assert http.calls[0]["json"] == {"email": "new@abv.bg"}
    saved = json.loads(storage.get_item("user"))
    assert saved["email"] == "new@abv.bg"
    assert saved["accessToken"] == "token-1"


def test_update_email_rejects_bad_address(service, http):
    with pytest.raises(ValidationError):
        service.update_email("not-an-email")
    assert http.calls == []


@pytest.mark.parametrize("status", [404, 405])
def test_update_email_unavailable(service, http, status):
    http.add("PUT", "/users/me", status, None)
    with pytest.raises(ServerError) as exc_info:
        service.update_email("new@abv.bg")
    assert exc_info.value.message == "Email update is not available. Please contact support."


def test_update_password_validates_locally(service, http):
    with pytest.raises(ValidationError) as exc_info:
        service.update_password("short")
    assert "Password must be at least 6 characters long" in exc_info.value.errors
    assert http.calls == []


def test_update_password_unavailable(service, http):
    with pytest.raises(ServerError) as exc_info:
        service.update_password("Secret12")
    assert exc_info.value.message == "Password update is not available. Please contact support."


def test_update_password_success(service, http):
    http.add("PUT", "/users/me", 200, {"_id": "user-1"})
    assert service.update_password("Secret12") is True
    assert http.calls[0]["json"] == {"password": "Secret12"}


def test_profile_changes_require_session(store, http):
    with pytest.raises(Unauthenticated):
        ProfileService(store).update_email("a@b.c")
    assert http.calls == []
