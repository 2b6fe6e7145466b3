"""Key-value storage behind the persisted collections.

Everything the site persists is a JSON array stored under one string key.
Callers talk to a store through ``get``/``set``/``remove`` only, so the
intake and registry logic runs the same against the database-backed store
used by the app and the in-memory store used in tests.
"""

import json
import logging

from flask import current_app

from models.models import db, StoredValue

logger = logging.getLogger(__name__)


class KeyValueStore:
    def get(self, key):
        raise NotImplementedError

    def set(self, key, value):
        raise NotImplementedError

    def remove(self, key):
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, initial=None):
        self._data = dict(initial or {})

    def get(self, key):
        return self._data.get(key)

    def set(self, key, value):
        self._data[key] = value

    def remove(self, key):
        self._data.pop(key, None)


class DatabaseStore(KeyValueStore):
    """One ``stored_value`` row per key; ``set`` replaces the row and commits."""

    def __init__(self, database=db):
        self.db = database

    def get(self, key):
        row = self.db.session.get(StoredValue, key)
        return row.value if row else None

    def set(self, key, value):
        try:
            row = self.db.session.get(StoredValue, key)
            if row:
                row.value = value
            else:
                self.db.session.add(StoredValue(key=key, value=value))
            self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            raise

    def remove(self, key):
        try:
            row = self.db.session.get(StoredValue, key)
            if row:
                self.db.session.delete(row)
                self.db.session.commit()
        except Exception:
            self.db.session.rollback()
            raise


def get_store():
    return current_app.extensions['kv_store']


def read_collection(store, key):
    """Load the JSON array under ``key``.

    A missing key is an empty collection. So is anything that does not parse
    as a JSON array; that case is logged, not raised.
    """
    raw = store.get(key)
    if not raw:
        return []
    try:
        items = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"[STORAGE] Ignoring malformed JSON under '{key}': {e}")
        return []
    if not isinstance(items, list):
        logger.warning(f"[STORAGE] Ignoring non-array value under '{key}' ({type(items).__name__})")
        return []
    return items


def write_collection(store, key, items):
    store.set(key, json.dumps(items))
