from django.contrib.sessions.backends.signed_cookies import SessionStore as CookieSession

from marketplace.storage import FileStorage, MemoryStorage, SessionStorage


def test_memory_storage_stores_strings():
    storage = MemoryStorage()
    storage.set_item("n", 5)
    assert storage.get_item("n") == "5"
    storage.remove_item("n")
    storage.remove_item("n")
    assert storage.get_item("n") is None


def test_session_storage_ignores_foreign_values():
    session = CookieSession()
    session["other"] = {"not": "a string"}
    storage = SessionStorage(session)

    storage.set_item("user", '{"_id": "u1"}')

    assert storage.get_item("user") == '{"_id": "u1"}'
    assert storage.get_item("other") is None
    assert session.modified


def test_file_storage_persists_between_instances(tmp_path):
    path = tmp_path / "state" / "storage.json"
    FileStorage(path).set_item("marketplace_data_seeded", "true")

    assert FileStorage(path).get_item("marketplace_data_seeded") == "true"


def test_file_storage_treats_garbage_as_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[1, 2", encoding="utf-8")
    storage = FileStorage(path)

    assert storage.get_item("user") is None
    storage.set_item("user", "x")
    assert storage.get_item("user") == "x"
