"""Queries on pets and their favourite food."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable

from pagespeed.db import where_in_placeholders
from pagespeed.models import Pet, PetFavoriteFood


class PetStore:
    """Reads pets and favourite foods from the database."""

    def __init__(self, db: sqlite3.Connection) -> None:
        self.db = db

    def get_pets(self) -> list[Pet]:
        """Return every pet."""
        rows = self.db.execute("SELECT id, name, animal, user_id FROM pets")
        return [Pet(*row) for row in rows]

    def get_favorite_food(self, pet_id: int) -> PetFavoriteFood:
        """Return the favourite food of one pet; the food is empty if none is stored."""
        favorite = PetFavoriteFood(pet_id=pet_id)
        rows = self.db.execute("SELECT food FROM pets_favorite_food WHERE pet_id = ?", (pet_id,))
        for (food,) in rows:
            favorite.food = food
        return favorite

    def get_favorite_foods(self, pet_ids: Iterable[int]) -> list[PetFavoriteFood]:
        """Return the favourite foods of all the given pets in one query."""
        placeholders, args = where_in_placeholders(pet_ids)
        if not args:
            return []
        stmt = f"SELECT food, pet_id FROM pets_favorite_food WHERE pet_id IN ({','.join(placeholders)})"
        return [PetFavoriteFood(food, pet_id) for food, pet_id in self.db.execute(stmt, args)]

    def get_pet_for_user(self, user_id: int) -> Pet:
        """Return the user's pet (the last one found), or an empty pet if none."""
        pet = Pet()
        rows = self.db.execute("SELECT id, name, animal, user_id FROM pets WHERE user_id = ?", (user_id,))
        for row in rows:
            pet = Pet(*row)
        return pet

    def get_pets_for_users(self, user_ids: Iterable[int]) -> list[Pet]:
        """Return the pets of all the given users in one query."""
        placeholders, args = where_in_placeholders(user_ids)
        if not args:
            return []
        stmt = f"SELECT id, name, animal, user_id FROM pets WHERE user_id IN ({','.join(placeholders)})"
        return [Pet(*row) for row in self.db.execute(stmt, args)]