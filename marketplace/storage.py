# marketplace/storage.py
"""
Per-browser key/value storage.

Values are always strings (JSON text), the same contract as the browser's
``localStorage``. The site uses the signed-cookie session so the data travels
with the browser; management commands use a JSON file.
"""
import json
from pathlib import Path


class LocalStorage:
    def get_item(self, key):
        raise NotImplementedError

    def set_item(self, key, value):
        raise NotImplementedError

    def remove_item(self, key):
        raise NotImplementedError


class MemoryStorage(LocalStorage):
    def __init__(self, initial=None):
        self._items = dict(initial or {})

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)

    def remove_item(self, key):
        self._items.pop(key, None)

    def keys(self):
        return list(self._items)


class SessionStorage(LocalStorage):
    """Backed by ``request.session`` (signed cookie in production)."""

    def __init__(self, session):
        self.session = session

    def get_item(self, key):
        value = self.session.get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key, value):
        self.session[key] = str(value)

    def remove_item(self, key):
        self.session.pop(key, None)


class FileStorage(LocalStorage):
    """
    A flat JSON object on disk. Every write rewrites the whole file.
    An unreadable file is treated as empty.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self):
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (FileNotFoundError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def get_item(self, key):
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key, value):
        data = self._load()
        data[key] = str(value)
        self._dump(data)

    def remove_item(self, key):
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)
