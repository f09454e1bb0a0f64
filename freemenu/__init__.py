# -*- coding: utf-8 -*-
"""
freemenu

Navigation menu resolution for administrative interfaces.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .core.configuration import FreeMenuSettings, configure, current_settings
from .core.dependencies import MenuResolverProvider
from .core.exceptions import (
    ExpressionEvaluationError,
    MenuDepthExceededError,
    MenuError,
    MissingRequestContextError,
    RouteGenerationError,
    UnsupportedItemError,
)
from .core.expressions import JinjaExpressionEvaluator
from .core.menu import (
    ContainerItemConfig,
    EntityAction,
    EntityItemConfig,
    ItemConfig,
    MenuResolver,
    MenuVisibilityFilter,
    ResolvedMenuItem,
    RouteItemConfig,
    UrlItemConfig,
    active_trail,
)
from .core.network import StarletteRouteGenerator
from .core.runtime import (
    CurrentRequestContext,
    RequestContextMiddleware,
    StarletteRequestContext,
)

__version__ = "0.1.0"

__all__ = [
    "ContainerItemConfig",
    "CurrentRequestContext",
    "EntityAction",
    "EntityItemConfig",
    "ExpressionEvaluationError",
    "FreeMenuSettings",
    "ItemConfig",
    "JinjaExpressionEvaluator",
    "MenuDepthExceededError",
    "MenuError",
    "MenuResolver",
    "MenuResolverProvider",
    "MenuVisibilityFilter",
    "MissingRequestContextError",
    "RequestContextMiddleware",
    "ResolvedMenuItem",
    "RouteGenerationError",
    "RouteItemConfig",
    "StarletteRequestContext",
    "StarletteRouteGenerator",
    "UnsupportedItemError",
    "UrlItemConfig",
    "__version__",
    "active_trail",
    "configure",
    "current_settings",
]


# The End
