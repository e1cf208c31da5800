"""The WSGI application and the server that runs it."""

from __future__ import annotations

import os
import socket
import sqlite3
from collections.abc import Iterable

from werkzeug import serving
from werkzeug.wrappers import Request, Response

from pagespeed.pet_store import PetStore
from pagespeed.routes import Handler, PetHandler, UserHandler
from pagespeed.user_store import UserStore

API_PREFIX = "/api/v2"
ALLOWED_METHODS = frozenset({"OPTIONS", "GET", "POST", "DELETE", "PUT", "PATCH"})
_ALLOWED_HEADERS = frozenset({"origin", "accept", "content-type", "x-requested-with"})
_PREFLIGHT_VARY = "Origin, Access-Control-Request-Method, Access-Control-Request-Headers"


def _not_found() -> Response:
    return Response("404 page not found\n", status=404, content_type="text/plain; charset=utf-8")


class _Cors:
    """Cross-origin checks for a fixed set of origins, with credentials allowed."""

    def __init__(self, origins: Iterable[str]) -> None:
        self.origins = frozenset(origin.lower() for origin in origins)

    def _origin_allowed(self, origin: str) -> bool:
        return bool(origin) and origin.lower() in self.origins

    def preflight(self, request: Request) -> Response:
        response = Response(status=204)
        response.headers.add("Vary", _PREFLIGHT_VARY)
        origin = request.headers.get("Origin", "")
        method = request.headers.get("Access-Control-Request-Method", "").upper()
        requested = request.headers.get("Access-Control-Request-Headers", "")
        names = [name.strip().lower() for name in requested.split(",") if name.strip()]
        if not self._origin_allowed(origin):
            return response
        if method != "OPTIONS" and method not in ALLOWED_METHODS:
            return response
        if any(name not in _ALLOWED_HEADERS for name in names):
            return response
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Methods"] = method
        if names:
            response.headers["Access-Control-Allow-Headers"] = requested
        response.headers["Access-Control-Allow-Credentials"] = "true"
        return response

    def decorate(self, request: Request, response: Response) -> Response:
        response.headers.add("Vary", "Origin")
        origin = request.headers.get("Origin", "")
        if self._origin_allowed(origin) and request.method.upper() in ALLOWED_METHODS:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Credentials"] = "true"
        return response


def create_app(db: sqlite3.Connection, allowed_origins: Iterable[str]):
    """Build the WSGI application serving the API under ``/api/v2``."""
    user_store = UserStore(db)
    pet_store = PetStore(db)
    routes: dict[str, Handler] = {
        **UserHandler(user_store, pet_store).routes(),
        **PetHandler(pet_store).routes(),
    }
    cors = _Cors(allowed_origins)

    @Request.application
    def app(request: Request) -> Response:
        if not request.path.startswith(API_PREFIX + "/"):
            return _not_found()
        path = request.path[len(API_PREFIX):]
        if request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers:
            return cors.preflight(request)
        handler = routes.get(path)
        response = handler(request) if handler else _not_found()
        return cors.decorate(request, response)

    return app


def _split_addr(addr: str) -> tuple[str, int]:
    if not addr:
        return "0.0.0.0", 80
    host, sep, port = addr.rpartition(":")
    if not sep:
        raise ValueError(f"address {addr}: missing port in address")
    host = host.strip("[]") or "0.0.0.0"
    if not port:
        return host, 80
    if port.isdigit():
        return host, int(port)
    return host, socket.getservbyname(port, "tcp")


class APIServer:
    """Serves the API on ``addr`` (``host:port``, host optional)."""

    def __init__(self, addr: str, db: sqlite3.Connection) -> None:
        self.addr = addr
        self.db = db

    def app(self):
        """Return the application, allowing the origins in FRONT_URL and FRONT_URL_WWW."""
        origins = [os.environ.get("FRONT_URL", ""), os.environ.get("FRONT_URL_WWW", "")]
        return create_app(self.db, origins)

    def run(self) -> None:
        """Serve until interrupted."""
        host, port = _split_addr(self.addr)
        application = self.app()
        print("listening on: ", self.addr)
        serving.run_simple(host, port, application)