"""
Key-value record store.

Every collection the engine keeps (assessment records, teacher class lists)
lives under one string key as a JSON list. Reads decode the whole list and
writes replace it; there is no partial update at this boundary. Two backends
share the same get/put contract: PostgreSQL for deployments and an in-memory
dict for tests and local development.
"""

import json
import logging
import secrets

import db


class CorruptRecordError(RuntimeError):
    """Stored value for a key is not valid JSON of the expected shape."""


def _decode(key, text):
    try:
        return json.loads(text)
    except ValueError as exc:
        logging.exception("Corrupt JSON stored under key %s", key)
        raise CorruptRecordError(f"Stored value for {key!r} is not valid JSON") from exc


def new_record_id():
    return secrets.token_urlsafe(12)


class MemoryRecordStore:
    """Process-local store. Values are kept as JSON text so every read returns fresh objects."""

    def __init__(self, initial=None):
        self._data = {}
        for key, value in (initial or {}).items():
            self.put(key, value)

    def get(self, key, default=None):
        if key not in self._data:
            return default
        return _decode(key, self._data[key])

    def put(self, key, value):
        self._data[key] = json.dumps(value)

    def put_raw(self, key, text):
        self._data[key] = text

    def keys(self):
        return sorted(self._data)


class PostgresRecordStore:
    """One row per key in the record_store table."""

    def __init__(self, database_url=None):
        self.database_url = database_url

    def get(self, key, default=None):
        with db.db_connection(self.database_url) as conn:
            c = conn.cursor()
            db.db_execute(c, 'SELECT value FROM record_store WHERE key = ?', (key,))
            row = c.fetchone()
        if not row:
            return default
        return _decode(key, row[0])

    def put(self, key, value):
        with db.db_connection(self.database_url, commit=True) as conn:
            c = conn.cursor()
            db.db_execute(
                c,
                '''INSERT INTO record_store (key, value, updated_at)
                   VALUES (?, ?, CURRENT_TIMESTAMP)
                   ON CONFLICT(key) DO UPDATE SET
                      value = excluded.value,
                      updated_at = excluded.updated_at''',
                (key, json.dumps(value)),
            )

    def keys(self):
        return db.list_keys(self.database_url)


class Collection:
    """A list of JSON objects stored under one key."""

    def __init__(self, store, key):
        self.store = store
        self.key = key

    def read_all(self):
        records = self.store.get(self.key, [])
        if not isinstance(records, list):
            logging.error("Value under %s is %s, expected a list", self.key, type(records).__name__)
            raise CorruptRecordError(f"Stored value for {self.key!r} is not a list")
        return records

    def write_all(self, records):
        self.store.put(self.key, list(records))

    def filter(self, predicate):
        return [r for r in self.read_all() if predicate(r)]

    def find(self, key_fn, key):
        for record in self.read_all():
            if key_fn(record) == key:
                return record
        return None

    def upsert(self, candidate, key_fn, create, replace):
        """
        Replace the record sharing candidate's composite key, or append a new one.

        create(candidate) builds a brand-new record; replace(existing, candidate)
        builds the replacement. Returns (stored_record, created).
        """
        records = self.read_all()
        key = key_fn(candidate)
        for index, existing in enumerate(records):
            if key_fn(existing) == key:
                records[index] = replace(existing, candidate)
                self.write_all(records)
                return records[index], False
        record = create(candidate)
        records.append(record)
        self.write_all(records)
        return record, True

    def remove(self, record_id):
        records = self.read_all()
        kept = [r for r in records if r.get('id') != record_id]
        if len(kept) == len(records):
            return False
        self.write_all(kept)
        return True
