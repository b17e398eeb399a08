import pytest

from marketplace.api_client import error_message, read_json
from marketplace.exceptions import AuthFailed, Forbidden, NetworkError, NotFound, ServerError
from tests.conftest import FakeResponse


def test_token_goes_in_x_authorization(api, http):
    http.add("GET", "/data/listings", 200, [])
    api.get("/data/listings", token="abc")

    call = http.calls[0]
    assert call["headers"] == {"X-Authorization": "abc"}
    assert call["timeout"] == 5


def test_no_token_means_no_auth_header(api, http):
    http.add("POST", "/users/login", 200, {})
    api.post("/users/login", json={"email": "a@b.c"})

    assert "X-Authorization" not in http.calls[0]["headers"]
    assert http.calls[0]["headers"]["Content-Type"] == "application/json"


def test_connection_failure_becomes_network_error(api, http):
    http.fail("GET", "/data/listings")
    with pytest.raises(NetworkError):
        api.get("/data/listings")


def test_read_json_falls_back_on_non_json():
    assert read_json(FakeResponse(500, "<html>"), default={}) == {}
    assert read_json(FakeResponse(500, None)) is None


def test_error_message_uses_body_message():
    assert error_message(FakeResponse(500, {"message": " Boom "}), "fallback") == "Boom"
    assert error_message(FakeResponse(500, ["x"]), "fallback") == "fallback"


@pytest.mark.parametrize("status, kwargs, exc_type, message", [
    (404, {"not_found": "Listing not found"}, NotFound, "Listing not found"),
    (403, {"forbidden": "Not yours"}, Forbidden, "Not yours"),
    (403, {"mutation": True}, AuthFailed, "Authentication failed. Please log in again."),
    (401, {}, AuthFailed, "Authentication failed. Please log in again."),
    (405, {"unavailable": "Not available"}, ServerError, "Not available"),
])
def test_check_maps_statuses(api, status, kwargs, exc_type, message):
    with pytest.raises(exc_type) as exc_info:
        api.check(FakeResponse(status, {}), **kwargs)
    assert exc_info.value.message == message
    assert exc_info.value.status == status


def test_check_server_error_prefers_body_message(api):
    with pytest.raises(ServerError) as exc_info:
        api.check(FakeResponse(500, {"message": "Database down"}), fallback="Failed")
    assert exc_info.value.message == "Database down"


def test_check_server_error_falls_back_when_body_is_not_json(api):
    with pytest.raises(ServerError) as exc_info:
        api.check(FakeResponse(502, "Bad Gateway"), fallback="Failed to load listings")
    assert exc_info.value.message == "Failed to load listings (502)"


def test_check_passes_success_through(api):
    response = FakeResponse(201, {"_id": "x"})
    assert api.check(response) is response
