"""Command line entry point: run the API server or seed the database."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from pagespeed.api import APIServer
from pagespeed.db import create_schema, open_storage
from pagespeed.seeder import seed_pets, seed_users

USAGE = "usage: pagespeed [run | seed]"


def main(argv: Sequence[str] | None = None) -> int:
    """Open the database named by $DB_URL, then serve on $PORT or seed it."""
    args = list(sys.argv[1:] if argv is None else argv)
    command = args[0] if args else "run"
    if command not in ("run", "seed"):
        print(f"Unknown command: {command}")
        print(USAGE)
        return 1

    db = open_storage()
    try:
        create_schema(db)
        if command == "seed":
            seed_pets(db)
            seed_users(db)
        else:
            APIServer(os.environ.get("PORT", ""), db).run()
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())