# -*- coding: utf-8 -*-
"""
context

Request context accessors consumed by the menu resolver.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Any, Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..exceptions import MissingRequestContextError
from ..network.routing import iter_routes

_current_request: ContextVar[Request | None] = ContextVar(
    "freemenu_current_request", default=None
)


class StarletteRequestContext:
    """Expose path and matched route of one Starlette request."""

    def __init__(self, request: Request) -> None:
        """Bind the accessor to ``request``."""

        self._request = request

    def current_request(self) -> Request:
        """Return the wrapped request."""

        return self._request

    def current_path(self) -> str:
        """Return the path of the wrapped request."""

        return self._request.url.path

    def current_route_name(self) -> str | None:
        """Return the name of the route matched for the wrapped request."""

        route = self._request.scope.get("route")
        if route is None:
            route = self._find_route_by_endpoint()
        return getattr(route, "name", None)

    def current_route_params(self) -> Mapping[str, Any]:
        """Return path parameters of the matched route."""

        return dict(self._request.path_params)

    def _find_route_by_endpoint(self) -> Any:
        endpoint = self._request.scope.get("endpoint")
        app = self._request.scope.get("app")
        router = getattr(app, "router", None)
        if endpoint is None or router is None:
            return None
        for route in iter_routes(getattr(router, "routes", ())):
            if getattr(route, "endpoint", None) is endpoint:
                return route
        return None


class CurrentRequestContext:
    """Read the request registered by ``RequestContextMiddleware`` on each call."""

    def _context(self) -> StarletteRequestContext:
        return current_request_context()

    def current_request(self) -> Request:
        """Return the in-flight request."""

        return self._context().current_request()

    def current_path(self) -> str:
        """Return the path of the in-flight request."""

        return self._context().current_path()

    def current_route_name(self) -> str | None:
        """Return the route name of the in-flight request."""

        return self._context().current_route_name()

    def current_route_params(self) -> Mapping[str, Any]:
        """Return the route parameters of the in-flight request."""

        return self._context().current_route_params()


def current_request_context() -> StarletteRequestContext:
    """Return an accessor bound to the in-flight request."""

    request = _current_request.get()
    if request is None:
        raise MissingRequestContextError("No request is being processed.")
    return StarletteRequestContext(request)


def push_request(request: Request) -> Token:
    """Register ``request`` as the in-flight request."""

    return _current_request.set(request)


def pop_request(token: Token) -> None:
    """Restore the request registered before ``token`` was issued."""

    _current_request.reset(token)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Register each HTTP request for ``CurrentRequestContext`` lookups."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        token = push_request(request)
        try:
            return await call_next(request)
        finally:
            pop_request(token)


__all__ = [
    "CurrentRequestContext",
    "RequestContextMiddleware",
    "StarletteRequestContext",
    "current_request_context",
    "pop_request",
    "push_request",
]


# The End
