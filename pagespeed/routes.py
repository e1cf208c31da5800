"""HTTP handlers for the user and pet endpoints."""

from __future__ import annotations

import json
import sqlite3
import sys
from collections.abc import Callable
from typing import Any

from werkzeug.wrappers import Request, Response

from pagespeed.models import PetWithFavoriteFood, UserWithPet
from pagespeed.pet_store import PetStore
from pagespeed.user_store import UserStore

Handler = Callable[[Request], Response]

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode_json(payload: Any) -> str:
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _JSON_ESCAPES.items():
        text = text.replace(char, escaped)
    return text + "\n"


def json_response(payload: Any) -> Response:
    """Return a 200 response holding ``payload`` as JSON."""
    return Response(_encode_json(payload), status=200, content_type="application/json")


def error_response(message: str, status: int = 500) -> Response:
    """Return a plain-text error response."""
    return Response(
        message + "\n",
        status=status,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


class PetHandler:
    """Endpoints that list pets."""

    def __init__(self, pet_store: PetStore) -> None:
        self.pet_store = pet_store

    def routes(self) -> dict[str, Handler]:
        """Map each path to its handler."""
        return {"/get_pets_with_favorite_food_bad": self.pets_with_favorite_food}

    def pets_with_favorite_food(self, request: Request) -> Response:
        """List every pet with its favourite food, one query per pet."""
        try:
            pets = self.pet_store.get_pets()
        except sqlite3.Error:
            return error_response("error getting pets")
        result = []
        for pet in pets:
            try:
                favorite = self.pet_store.get_favorite_food(pet.id)
            except sqlite3.Error:
                return error_response("error getting favorite food")
            result.append(PetWithFavoriteFood(pet.name, pet.animal, favorite.food).to_dict())
        return json_response(result)


class UserHandler:
    """Endpoints that list and search users."""

    def __init__(self, user_store: UserStore, pet_store: PetStore) -> None:
        self.user_store = user_store
        self.pet_store = pet_store

    def routes(self) -> dict[str, Handler]:
        """Map each path to its handler."""
        return {
            "/get_users": self.get_users,
            "/get_users_with_pets_bad": self.users_with_pets_bad,
            "/get_users_with_pets_good": self.users_with_pets_good,
            "/search_users": self.search_users,
        }

    def get_users(self, request: Request) -> Response:
        """List every user."""
        try:
            users = self.user_store.get_users()
        except sqlite3.Error:
            return error_response("error getting user")
        return json_response([user.to_dict() for user in users])

    def users_with_pets_bad(self, request: Request) -> Response:
        """List every user with a pet, running two queries per user."""
        try:
            users = self.user_store.get_users()
        except sqlite3.Error:
            return error_response("error getting user")
        result = []
        for user in users:
            try:
                pet = self.pet_store.get_pet_for_user(user.id)
            except sqlite3.Error:
                return error_response("error getting pet")
            try:
                favorite = self.pet_store.get_favorite_food(pet.id)
            except sqlite3.Error:
                return error_response("error getting favorite food")
            pet_view = PetWithFavoriteFood(pet.name, pet.animal, favorite.food)
            result.append(UserWithPet(user.id, user.username, pet_view).to_dict())
        return json_response(result)

    def users_with_pets_good(self, request: Request) -> Response:
        """List users that have pets, using a fixed number of queries."""
        try:
            users = self.user_store.get_users()
        except sqlite3.Error:
            return error_response("error getting user")
        users_by_id = {user.id: user for user in users}
        try:
            pets = self.pet_store.get_pets_for_users([user.id for user in users])
        except sqlite3.Error:
            return error_response("error getting pets")
        pets_by_user: dict[int, list] = {}
        for pet in pets:
            pets_by_user.setdefault(pet.user_id, []).append(pet)
        try:
            foods = self.pet_store.get_favorite_foods([pet.id for pet in pets])
        except sqlite3.Error:
            return error_response("error getting favorite foods")
        food_by_pet = {food.pet_id: food.food for food in foods}

        result = []
        for user_id, user_pets in pets_by_user.items():
            user = users_by_id[user_id]
            for pet in user_pets:
                pet_view = PetWithFavoriteFood(pet.name, pet.animal, food_by_pet.get(pet.id, ""))
                result.append(UserWithPet(user.id, user.username, pet_view).to_dict())
        return json_response(result)

    def search_users(self, request: Request) -> Response:
        """Search users by the ``userName`` query parameter."""
        text = request.args.get("userName", "")
        try:
            matches = self.user_store.search_users(text)
        except sqlite3.Error as exc:
            print(exc, file=sys.stderr)
            return error_response("error getting users")
        return json_response([match.to_dict() for match in matches] or None)