# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for FreeMenu test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

import pytest

from freemenu.core.configuration import FreeMenuSettings, configure, reset_settings
from freemenu.core.exceptions import RouteGenerationError


class MenuState:
    """Manage global menu configuration during tests."""

    def reset(self) -> None:
        """Install default settings unaffected by the process environment."""

        reset_settings()
        configure(FreeMenuSettings())


class StubRequestContext:
    """Request context returning fixed request data."""

    def __init__(
        self,
        path: str = "/",
        *,
        route: str | None = None,
        route_params: Mapping[str, Any] | None = None,
        request: Any = None,
    ) -> None:
        self.path = path
        self.route = route
        self.route_params = dict(route_params or {})
        self.request = request if request is not None else object()

    def current_request(self) -> Any:
        return self.request

    def current_path(self) -> str:
        return self.path

    def current_route_name(self) -> str | None:
        return self.route

    def current_route_params(self) -> Mapping[str, Any]:
        return dict(self.route_params)


class RecordingRouteGenerator:
    """Route generator formatting known route templates and recording calls."""

    def __init__(self, routes: Mapping[str, str]) -> None:
        self.routes = dict(routes)
        self.calls: list[tuple[str, Dict[str, Any]]] = []

    def generate(self, route_name: str, params: Mapping[str, Any]) -> str:
        self.calls.append((route_name, dict(params)))
        template = self.routes.get(route_name)
        if template is None:
            raise RouteGenerationError(route_name, params)
        return template.format(**params)


class RecordingEvaluator:
    """Evaluator delegating to ``func`` and recording received contexts."""

    def __init__(self, func: Callable[[str, Mapping[str, Any]], Any] | None = None) -> None:
        self.func = func or (lambda source, context: False)
        self.calls: list[tuple[str, Dict[str, Any]]] = []

    def evaluate(self, source: str, context: Mapping[str, Any]) -> Any:
        self.calls.append((source, dict(context)))
        return self.func(source, context)


class ExplodingEvaluator:
    """Evaluator failing the test whenever it is consulted."""

    def evaluate(self, source: str, context: Mapping[str, Any]) -> Any:
        raise AssertionError(f"evaluator must not be called for {source!r}")


menu_state = MenuState()


@pytest.fixture(autouse=True)
def _reset_menu_state():
    """Give every test a fresh default configuration."""

    menu_state.reset()
    yield
    reset_settings()


__all__ = [
    "ExplodingEvaluator",
    "RecordingEvaluator",
    "RecordingRouteGenerator",
    "StubRequestContext",
    "menu_state",
]


# The End
