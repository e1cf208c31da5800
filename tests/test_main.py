import sqlite3
from unittest import mock

import pytest

from pagespeed.main import main


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "app.db"
    monkeypatch.setenv("DB_URL", str(path))
    return path


def test_unknown_command(capsys, db_path):
    assert main(["bogus"]) == 1
    assert "Unknown command: bogus" in capsys.readouterr().out
    assert not db_path.exists()


def test_seed_command_fills_database(db_path):
    assert main(["seed"]) == 0
    with sqlite3.connect(db_path) as conn:
        users = conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]
        pets = conn.execute("SELECT COUNT(*) FROM pets").fetchone()[0]
        foods = conn.execute("SELECT COUNT(*) FROM pets_favorite_food").fetchone()[0]
    assert (users, pets, foods) == (500, 500, 500)


@mock.patch("werkzeug.serving.run_simple")
def test_default_command_runs_server(run_simple, db_path, monkeypatch):
    monkeypatch.setenv("PORT", ":9090")
    assert main([]) == 0
    assert run_simple.call_args.args[:2] == ("0.0.0.0", 9090)


@mock.patch("werkzeug.serving.run_simple")
def test_bad_port_raises(run_simple, db_path, monkeypatch):
    monkeypatch.setenv("PORT", "nocolon")
    with pytest.raises(ValueError):
        main(["run"])
    assert run_simple.call_count == 0