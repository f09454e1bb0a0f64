# -*- coding: utf-8 -*-
"""
interfaces

Protocols for the collaborators consumed by the menu resolver.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class RouteGenerator(Protocol):
    """Protocol describing objects that turn route names into URLs."""

    def generate(self, route_name: str, params: Mapping[str, Any]) -> str:
        """Return the URL for ``route_name`` or raise ``RouteGenerationError``."""


@runtime_checkable
class RequestContext(Protocol):
    """Protocol describing read access to the request being served."""

    def current_request(self) -> Any:
        """Return the request object exposed to active expressions."""

    def current_path(self) -> str:
        """Return the path of the current request."""

    def current_route_name(self) -> str | None:
        """Return the name of the route matched for the current request."""

    def current_route_params(self) -> Mapping[str, Any]:
        """Return the parameters of the matched route."""


@runtime_checkable
class ExpressionEvaluator(Protocol):
    """Protocol describing evaluators for active-state expressions."""

    def evaluate(self, source: str, context: Mapping[str, Any]) -> Any:
        """Evaluate ``source`` against ``context``."""


__all__ = ["ExpressionEvaluator", "RequestContext", "RouteGenerator"]


# The End
