# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for menu resolution.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping


class MenuError(Exception):
    """Base class for menu-specific exceptions."""


class UnsupportedItemError(MenuError, TypeError):
    """Raised when an item configuration of an unknown kind is resolved."""

    def __init__(self, item: Any) -> None:
        super().__init__(f'Item of class "{type(item).__name__}" is not supported.')
        self.item = item


class RouteGenerationError(MenuError):
    """Raised when a route is unknown or its parameters are incomplete."""

    def __init__(
        self,
        route: str,
        params: Mapping[str, Any] | None = None,
        detail: str | None = None,
    ) -> None:
        message = detail or f'Unable to generate a URL for route "{route}".'
        super().__init__(message)
        self.route = route
        self.params = dict(params or {})


class ExpressionEvaluationError(MenuError):
    """Raised when an active expression is malformed or fails to evaluate."""

    def __init__(self, expression: str, detail: str | None = None) -> None:
        message = f'Failed to evaluate expression "{expression}"'
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.expression = expression


class MissingRequestContextError(MenuError, RuntimeError):
    """Raised when request data is read outside of a request scope."""


class MenuDepthExceededError(MenuError):
    """Raised when a menu tree nests deeper than the configured limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Menu nesting exceeds the configured depth of {limit}.")
        self.limit = limit


__all__ = [
    "ExpressionEvaluationError",
    "MenuDepthExceededError",
    "MenuError",
    "MissingRequestContextError",
    "RouteGenerationError",
    "UnsupportedItemError",
]


# The End
