"""Records for users, pets and their favourite food."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Pet:
    id: int = 0
    name: str = ""
    animal: str = ""
    user_id: int = 0


@dataclass
class PetFavoriteFood:
    food: str = ""
    pet_id: int = 0


@dataclass
class PetWithFavoriteFood:
    name: str = ""
    animal: str = ""
    favorite_food: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the record."""
        return {"name": self.name, "animal": self.animal, "favoriteFood": self.favorite_food}


@dataclass
class User:
    id: int = 0
    username: str = ""
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the record."""
        return {"ID": self.id, "UserName": self.username, "Email": self.email}


@dataclass
class UserWithPet:
    id: int = 0
    username: str = ""
    pet: PetWithFavoriteFood = field(default_factory=PetWithFavoriteFood)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the record."""
        return {"id": self.id, "username": self.username, "pet": self.pet.to_dict()}