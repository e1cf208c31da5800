# pagespeed

A small JSON API over a SQLite database of users, their pets and the pets'
favourite foods. The same data is served through a slow per-row ("N+1")
query path and a batched query path, so the two can be compared from a
front end.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Configuration

The command reads its settings from the environment:

- `DB_URL`: the SQLite database to open (a file path, or a `file:` URI).
- `PORT`: the address to listen on, as `host:port` with the host optional,
  for example `:8080`. When empty the server listens on `0.0.0.0:80`.
- `FRONT_URL`, `FRONT_URL_WWW`: the origins allowed by CORS, with
  credentials. Allowed methods are `OPTIONS`, `GET`, `POST`, `DELETE`, `PUT`
  and `PATCH`.

## Commands

    pagespeed seed

Creates the `users`, `pets` and `pets_favorite_food` tables if they are
missing, then inserts 500 made-up pets (one per user id 1 to 500, each with
a favourite food) and 500 made-up users with `@example.com` addresses.

    pagespeed run

Creates the tables if they are missing and serves the API until
interrupted. `run` is also what `pagespeed` does with no arguments. Any
other command prints a usage line and exits with status 1.

## Routes

All routes are served under `/api/v2/`; anything else answers 404.

| Route | Returns |
| --- | --- |
| `/api/v2/get_users` | every user, as `{"ID", "UserName", "Email"}` |
| `/api/v2/get_users_with_pets_bad` | every user with one pet, two queries per user |
| `/api/v2/get_users_with_pets_good` | users that have pets, with all their pets, in three queries |
| `/api/v2/search_users?userName=...` | users whose name matches, spaces acting as wildcards; `null` when nothing matches |
| `/api/v2/get_pets_with_favorite_food_bad` | every pet with its favourite food, one query per pet |

Users with pets come as `{"id", "username", "pet": {"name", "animal",
"favoriteFood"}}`. A database error answers 500 with a short plain-text
message.

## Using it as a library

    from pagespeed.db import open_storage, create_schema
    from pagespeed.seeder import seed_users, seed_pets
    from pagespeed.api import create_app

    db = open_storage("app.db")
    create_schema(db)
    seed_users(db)
    seed_pets(db)

    app = create_app(db, ["http://localhost:3000"])

`app` is a WSGI application. `pagespeed.api.APIServer(addr, db)` builds the
same application with the origins from `FRONT_URL` and `FRONT_URL_WWW`
(`APIServer.app()`) and serves it with `APIServer.run()`.

The stores can be used directly as well:

    from pagespeed.user_store import UserStore
    from pagespeed.pet_store import PetStore

    users = UserStore(db).search_users("ann smi")
    pets = PetStore(db).get_pets_for_users([1, 2, 3])

`PetStore` also offers `get_pets()`, `get_favorite_food(pet_id)`,
`get_favorite_foods(pet_ids)` and `get_pet_for_user(user_id)`;
`UserStore` offers `get_users()`. They return the dataclasses in
`pagespeed.models`.

## What it does not do

The schema is only created, never migrated or dropped: there is no command
to upgrade or tear down the database. Seeding always inserts fresh rows and
does not clear existing ones. The API is read-only and has no
authentication.