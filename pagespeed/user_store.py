"""Queries on users."""

from __future__ import annotations

import sqlite3

from pagespeed.models import PetWithFavoriteFood, User, UserWithPet

_SEARCH = """
    SELECT
        users.id,
        users.username,
        pets.name,
        pets.animal,
        pets_favorite_food.food
    FROM users
    JOIN pets ON pets.user_id = users.id
    JOIN pets_favorite_food ON pets_favorite_food.pet_id = pets.id
    WHERE users.username LIKE ?
"""


class UserStore:
    """Reads users from the database."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self.db = db

    def get_users(self) -> list[User]:
        """Return every user."""
        rows = self.db.execute("SELECT id, username, email FROM USERS")
        return [User(*row) for row in rows]

    def search_users(self, text: str) -> list[UserWithPet]:
        """Find users whose name matches ``text``, spaces acting as wildcards.

        Each match comes with its pet and that pet's favourite food.
        """
        pattern = "%" + text.replace(" ", "%") + "%"
        return [
            UserWithPet(user_id, username, PetWithFavoriteFood(name, animal, food))
            for user_id, username, name, animal, food in self.db.execute(_SEARCH, (pattern,))
        ]