# -*- coding: utf-8 -*-
"""
dependencies

FastAPI dependency building request-scoped menu resolvers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from fastapi import Request

from .configuration.conf import FreeMenuSettings, current_settings
from .expressions import JinjaExpressionEvaluator
from .menu.interfaces import ExpressionEvaluator
from .menu.resolver import MenuResolver
from .network.routing import StarletteRouteGenerator
from .runtime.context import StarletteRequestContext


class MenuResolverProvider:
    """Create a ``MenuResolver`` bound to the request being served.

    Instances are meant to be used with ``Depends``::

        menu_resolver = MenuResolverProvider()

        @app.get("/panel")
        def panel(resolver: MenuResolver = Depends(menu_resolver)):
            return resolver.resolve(MENU)
    """

    def __init__(
        self,
        *,
        settings: FreeMenuSettings | None = None,
        evaluator: ExpressionEvaluator | None = None,
    ) -> None:
        """Store explicitly supplied collaborators reused across requests.

        Without explicit ``settings`` the active configuration is read on
        every request, and the default evaluator is rebuilt only when that
        configuration is replaced.
        """

        self._settings = settings
        self._evaluator = evaluator
        self._cached: tuple[FreeMenuSettings, ExpressionEvaluator] | None = None

    @property
    def settings(self) -> FreeMenuSettings:
        """Return the settings handed to created resolvers."""

        return self._settings or current_settings()

    @property
    def evaluator(self) -> ExpressionEvaluator:
        """Return the evaluator shared by created resolvers."""

        if self._evaluator is not None:
            return self._evaluator
        settings = self.settings
        cached = self._cached
        if cached is None or cached[0] is not settings:
            cached = (settings, JinjaExpressionEvaluator(settings=settings))
            self._cached = cached
        return cached[1]

    def __call__(self, request: Request) -> MenuResolver:
        """Return a resolver reading from ``request`` and its application routes."""

        route_generator = StarletteRouteGenerator(
            request.app, root_path=request.scope.get("root_path", "")
        )
        return MenuResolver(
            StarletteRequestContext(request),
            route_generator,
            self.evaluator,
            settings=self.settings,
        )


__all__ = ["MenuResolverProvider"]


# The End
