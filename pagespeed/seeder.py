"""Fill the database with made-up users, pets and favourite foods."""

from __future__ import annotations

import random
import sqlite3

from pagespeed.models import Pet, PetFavoriteFood, User

PET_COUNT = 500
USER_COUNT = 500

_FIRST_NAMES = (
    "Amelia", "Benjamin", "Chloe", "Daniel", "Elena", "Felix", "Grace", "Henry",
    "Isla", "Jack", "Katherine", "Liam", "Maya", "Noah", "Olivia", "Peter",
    "Quinn", "Rosa", "Samuel", "Tessa", "Umar", "Violet", "William", "Yara", "Zane",
)
_LAST_NAMES = (
    "Anderson", "Brooks", "Carter", "Dawson", "Ellis", "Fletcher", "Garcia", "Hughes",
    "Ingram", "Jensen", "Keller", "Lambert", "Morales", "Nash", "Ortega", "Porter",
    "Quincy", "Ramsey", "Sutton", "Turner", "Underwood", "Vaughn", "Walsh", "Young",
)
_ANIMALS = (
    "dog", "cat", "rabbit", "hamster", "parrot", "turtle", "goldfish", "ferret",
    "guinea pig", "lizard", "snake", "canary", "chinchilla", "hedgehog", "horse",
)
_SNACKS = (
    "peanut butter cookies", "cheese crackers", "apple slices", "carrot sticks",
    "popcorn", "trail mix", "pretzels", "granola bar", "banana chips", "yogurt",
    "sunflower seeds", "rice cakes", "dried cranberries", "beef jerky", "blueberries",
)


def _fake_user() -> User:
    first = random.choice(_FIRST_NAMES)
    last = random.choice(_LAST_NAMES)
    email = f"{first.lower()}.{last.lower()}{random.randint(0, 999)}@example.com"
    return User(username=f"{first} {last}", email=email)


def _fake_pet(user_id: int) -> Pet:
    return Pet(name=random.choice(_LAST_NAMES), animal=random.choice(_ANIMALS), user_id=user_id)


def _fake_favorite_food(pet_id: int) -> PetFavoriteFood:
    return PetFavoriteFood(food=random.choice(_SNACKS), pet_id=pet_id)


def seed_pets(db: sqlite3.Connection) -> None:
    """Insert one pet per user id 1..500, each with a favourite food.

    Favourite foods are attached to pet ids counting down from 500 to 1.
    """
    food_pet_ids = range(PET_COUNT, 0, -1)
    for user_id, food_pet_id in zip(range(1, PET_COUNT + 1), food_pet_ids):
        pet = _fake_pet(user_id)
        db.execute(
            "INSERT INTO pets (name, animal, user_id) VALUES (?, ?, ?)",
            (pet.name, pet.animal, pet.user_id),
        )
        favorite = _fake_favorite_food(food_pet_id)
        db.execute(
            "INSERT INTO pets_favorite_food (food, pet_id) VALUES (?, ?)",
            (favorite.food, favorite.pet_id),
        )


def seed_users(db: sqlite3.Connection) -> None:
    """Insert 500 users with made-up names and e-mail addresses."""
    for _ in range(USER_COUNT):
        user = _fake_user()
        db.execute(
            "INSERT INTO users (username, email) VALUES (?, ?)",
            (user.username, user.email),
        )