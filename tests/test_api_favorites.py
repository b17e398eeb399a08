def test_requires_session(web):
    response = web.get("/api/me/favorites/")
    assert response.status_code == 403
    assert response.json() == {"detail": "Please login to like listings"}


def test_toggle_and_list(web_user):
    response = web_user.post("/api/listings/l1/favorite/")
    assert response.status_code == 200
    assert response.json() == {"favorited": True, "message": "Added to favorites"}

    assert web_user.get("/api/listings/l1/favorite/").json() == {"favorited": True}
    assert web_user.get("/api/me/favorites/").json() == {"favorites": ["l1"], "count": 1}

    response = web_user.post("/api/listings/l1/favorite/")
    assert response.json() == {"favorited": False, "message": "Removed from favorites"}
    assert web_user.get("/api/me/favorites/").json()["count"] == 0


def test_shares_storage_with_html_views(web_user):
    web_user.post("/listing/l9/favorite/")
    assert web_user.get("/api/me/favorites/").json()["favorites"] == ["l9"]


CSRF_SECRET = "a" * 32


def test_toggle_rejects_missing_csrf_token(web_user):
    web_user.handler.enforce_csrf_checks = True

    response = web_user.post("/api/listings/l1/favorite/")

    assert response.status_code == 403
    assert response.json()["detail"].startswith("CSRF Failed")
    web_user.handler.enforce_csrf_checks = False
    assert web_user.get("/api/me/favorites/").json()["count"] == 0


def test_toggle_accepts_csrf_token(web_user):
    web_user.handler.enforce_csrf_checks = True
    web_user.cookies["csrftoken"] = CSRF_SECRET

    response = web_user.post("/api/listings/l1/favorite/", HTTP_X_CSRFTOKEN=CSRF_SECRET)

    assert response.status_code == 200
    assert response.json()["favorited"] is True


def test_reads_do_not_need_csrf_token(web_user):
    web_user.handler.enforce_csrf_checks = True
    assert web_user.get("/api/me/favorites/").status_code == 200
