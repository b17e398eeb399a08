import pytest

from marketplace.exceptions import Forbidden, NotFound, Unauthenticated, ValidationError
from marketplace.services.comments import CommentService


@pytest.fixture
def service(logged_in):
    return CommentService(logged_in)


def test_fetch_comments_filters_by_listing(store, http):
    http.add("GET", "/data/comments", 200, [
        {"_id": "c1", "_ownerId": "user-2", "listingId": "l1", "text": "Still available?"},
    ])

    comments = CommentService(store).fetch_comments("l1")

    assert http.calls[0]["params"] == {"where": 'listingId="l1"'}
    assert comments[0]["id"] == "c1"
    assert comments[0]["ownerId"] == "user-2"


def test_fetch_comments_missing_collection_is_empty(store, http):
    assert CommentService(store).fetch_comments("l1") == []


def test_fetch_comments_never_raises(store, http):
    service = CommentService(store)
    http.fail("GET", "/data/comments")

    assert service.fetch_comments("l1") == []
    assert service.last_error is not None
    assert service.loading is False


def test_fetch_comments_without_listing_id(store, http):
    assert CommentService(store).fetch_comments("") == []
    assert http.calls == []


def test_create_comment_sends_author_email(service, http):
    http.add("POST", "/data/comments", 200, {"_id": "c9", "listingId": "l1", "text": "Hi"})

    comment = service.create_comment("l1", "  Hi  ")

    call = http.calls[0]
    assert call["json"] == {"listingId": "l1", "text": "Hi", "authorEmail": "peter@abv.bg"}
    assert call["headers"]["X-Authorization"] == "token-1"
    assert comment["id"] == "c9"


def test_create_comment_requires_text(service, http):
    with pytest.raises(ValidationError) as exc_info:
        service.create_comment("l1", "   ")
    assert exc_info.value.message == "Comment text is required"
    assert http.calls == []


def test_create_comment_requires_session(store, http):
    with pytest.raises(Unauthenticated):
        CommentService(store).create_comment("l1", "Hi")
    assert http.calls == []


def test_delete_comment_not_owner(service, http):
    http.add("DELETE", "/data/comments/c1", 403, {})
    with pytest.raises(Forbidden) as exc_info:
        service.delete_comment("c1")
    assert exc_info.value.message == "You do not have permission to delete this comment"


def test_delete_comment_missing(service, http):
    with pytest.raises(NotFound) as exc_info:
        service.delete_comment("c1")
    assert exc_info.value.message == "Comment not found"
