import sqlite3

import pytest

from pagespeed.db import StorageError, create_schema, open_storage, where_in_placeholders


def _tables(db):
    rows = db.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
    ).fetchall()
    return {name for (name,) in rows}


def test_open_storage_memory_and_schema():
    db = open_storage(":memory:")
    create_schema(db)
    assert _tables(db) == {"users", "pets", "pets_favorite_food"}


def test_create_schema_is_idempotent():
    db = open_storage(":memory:")
    create_schema(db)
    db.execute("INSERT INTO users (username, email) VALUES (?, ?)", ("ann", "ann@example.com"))
    create_schema(db)
    assert db.execute("SELECT username FROM users").fetchall() == [("ann",)]


def test_open_storage_uses_environment(tmp_path, monkeypatch):
    path = tmp_path / "app.db"
    monkeypatch.setenv("DB_URL", str(path))
    db = open_storage()
    create_schema(db)
    db.execute("INSERT INTO pets (name, animal, user_id) VALUES (?, ?, ?)", ("Rex", "dog", 1))
    db.close()
    assert path.exists()
    reopened = open_storage(str(path))
    assert reopened.execute("SELECT name, animal, user_id FROM pets").fetchall() == [("Rex", "dog", 1)]


def test_open_storage_autocommits(tmp_path):
    path = str(tmp_path / "auto.db")
    writer = open_storage(path)
    create_schema(writer)
    writer.execute("INSERT INTO users (username, email) VALUES (?, ?)", ("bo", "bo@example.com"))
    reader = open_storage(path)
    assert reader.execute("SELECT email FROM users").fetchall() == [("bo@example.com",)]


def test_open_storage_error(tmp_path):
    with pytest.raises(StorageError):
        open_storage(str(tmp_path / "missing" / "nested" / "x.db"))


def test_storage_error_keeps_cause(tmp_path):
    with pytest.raises(StorageError) as info:
        open_storage(str(tmp_path / "missing" / "x.db"))
    assert isinstance(info.value.__cause__, sqlite3.Error)


def test_where_in_placeholders():
    placeholders, args = where_in_placeholders([4, 8, 15])
    assert placeholders == ["?", "?", "?"]
    assert args == [4, 8, 15]


def test_where_in_placeholders_empty():
    assert where_in_placeholders([]) == ([], [])


def test_where_in_placeholders_accepts_generator():
    placeholders, args = where_in_placeholders(i for i in (7, 9))
    assert len(placeholders) == len(args)
    assert args == [7, 9]