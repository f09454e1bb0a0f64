# -*- coding: utf-8 -*-
"""
routing

Route generator backed by a Starlette or FastAPI routing table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple
from urllib.parse import urlencode

from starlette.applications import Starlette
from starlette.routing import BaseRoute, Mount, NoMatchFound, Router

from ..exceptions import RouteGenerationError


class StarletteRouteGenerator:
    """Generate URLs for named routes registered on an application router.

    Parameters matching path placeholders of the route are substituted into
    the path, any remaining non-null parameters are appended as a query
    string.
    """

    def __init__(self, router: Router | Starlette, *, root_path: str = "") -> None:
        """Bind the generator to ``router`` and an optional ``root_path``."""

        self._router: Router = getattr(router, "router", router)
        self._root_path = root_path.rstrip("/")

    @property
    def root_path(self) -> str:
        """Return the prefix prepended to generated paths."""

        return self._root_path

    def generate(self, route_name: str, params: Mapping[str, Any]) -> str:
        """Return the URL for ``route_name`` filled with ``params``."""

        route = self._find_route(route_name)
        if route is None:
            # Mounted sub-applications only accept their exact path parameters.
            path_params, extras = dict(params), {}
        else:
            path_params, extras = self._split_params(route, route_name, params)
        path = self._url_path_for(route_name, path_params, params)
        url = f"{self._root_path}{path}"
        query = urlencode(extras, doseq=True)
        if query:
            url = f"{url}?{query}"
        return url

    def _find_route(self, route_name: str) -> BaseRoute | None:
        for route in iter_routes(self._router.routes):
            if getattr(route, "name", None) == route_name:
                return route
        return None

    @staticmethod
    def _split_params(
        route: BaseRoute, route_name: str, params: Mapping[str, Any]
    ) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        placeholders = set(getattr(route, "param_convertors", {}))
        missing = sorted(placeholders.difference(params))
        if missing:
            raise RouteGenerationError(
                route_name,
                params,
                f'Missing parameters {missing} to generate a URL for route "{route_name}".',
            )
        path_params = {key: params[key] for key in placeholders}
        extras = {
            key: value
            for key, value in params.items()
            if key not in placeholders and value is not None
        }
        return path_params, extras

    def _url_path_for(
        self,
        route_name: str,
        path_params: Mapping[str, Any],
        params: Mapping[str, Any],
    ) -> str:
        # The application router composes prefixes of included routers.
        try:
            path = self._router.url_path_for(route_name, **dict(path_params))
        except NoMatchFound as exc:
            raise RouteGenerationError(
                route_name, params, f'Route "{route_name}" does not exist.'
            ) from exc
        except (AssertionError, TypeError, ValueError) as exc:
            raise RouteGenerationError(route_name, params, str(exc) or None) from exc
        return str(path)


def iter_routes(routes: Iterable[BaseRoute]) -> Iterator[BaseRoute]:
    """Yield endpoint routes of ``routes`` including those of included routers.

    Mounted applications are skipped, their routes are addressed through
    ``mount:name`` lookups on the parent router.
    """

    for route in routes:
        if isinstance(route, Mount):
            continue
        if hasattr(route, "param_convertors"):
            yield route
            continue
        nested = getattr(route, "routes", None)
        if nested is None:
            nested = getattr(getattr(route, "router", None), "routes", None)
        if nested:
            yield from iter_routes(nested)


__all__ = ["StarletteRouteGenerator", "iter_routes"]


# The End
