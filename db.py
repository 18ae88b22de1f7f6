import logging
import os
from contextlib import contextmanager

import psycopg2
from psycopg2.extras import DictCursor
from dotenv import load_dotenv

load_dotenv()


def get_database_url():
    url = (os.getenv("DATABASE_URL") or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL not found. Set it in .env")
    if not url.startswith(("postgres://", "postgresql://")):
        raise RuntimeError("DATABASE_URL must be a postgresql:// connection string.")
    return url


def _adapt_query(query):
    return query.replace('?', '%s')


def db_execute(cursor, query, params=None):
    """
    Executes a SQL query using the provided cursor.
    Rolls back if there is an error.
    """
    try:
        if params is None:
            return cursor.execute(_adapt_query(query))
        return cursor.execute(_adapt_query(query), params)
    except psycopg2.Error:
        cursor.connection.rollback()
        logging.exception("SQL error while running: %s", query.split('\n', 1)[0])
        raise


def get_db(database_url=None):
    """Create a PostgreSQL DB connection."""
    return psycopg2.connect(database_url or get_database_url(), cursor_factory=DictCursor, connect_timeout=10)


@contextmanager
def db_connection(database_url=None, commit=False):
    """Context manager for PostgreSQL connections with optional commit."""
    conn = get_db(database_url)
    try:
        yield conn
        if commit:
            conn.commit()
    finally:
        conn.close()


def init_db(database_url=None):
    """
    Creates the key-value table backing the record store if it doesn't exist.
    """
    with db_connection(database_url, commit=True) as conn:
        cursor = conn.cursor()
        db_execute(cursor, '''
            CREATE TABLE IF NOT EXISTS record_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')
    logging.info("record_store table is ready.")


def list_keys(database_url=None):
    """Keys currently held in the record store."""
    with db_connection(database_url) as conn:
        cursor = conn.cursor()
        db_execute(cursor, "SELECT key FROM record_store ORDER BY key")
        return [row[0] for row in cursor.fetchall()]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    for key in list_keys():
        print(key)
