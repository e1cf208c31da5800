"""SQLite storage: opening a connection, the schema and query helpers."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterable

DB_URL_ENV = "DB_URL"

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username TEXT NOT NULL,
        email TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS pets (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        animal TEXT NOT NULL,
        user_id INTEGER NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS pets_favorite_food (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        food TEXT NOT NULL,
        pet_id INTEGER NOT NULL
    )
    """,
)


class StorageError(Exception):
    """Raised when the database cannot be opened."""


def open_storage(url: str | None = None) -> sqlite3.Connection:
    """Open the SQLite database at ``url``, or at ``$DB_URL`` when not given.

    The connection runs in autocommit mode and may be shared between threads.
    """
    if url is None:
        url = os.environ.get(DB_URL_ENV, "")
    try:
        return sqlite3.connect(
            url,
            uri=url.startswith("file:"),
            check_same_thread=False,
            isolation_level=None,
        )
    except sqlite3.Error as exc:
        raise StorageError(f"error opening database: {exc}") from exc


def create_schema(db: sqlite3.Connection) -> None:
    """Create the users, pets and pets_favorite_food tables if missing."""
    for statement in _SCHEMA:
        db.execute(statement)


def where_in_placeholders(ids: Iterable[int]) -> tuple[list[str], list[int]]:
    """Return one ``?`` placeholder per id together with the ids as arguments."""
    args = list(ids)
    return ["?"] * len(args), args