"""JSON API over a SQLite database of users, pets and their favourite foods, with a seeding command."""

__version__ = "0.1.0"