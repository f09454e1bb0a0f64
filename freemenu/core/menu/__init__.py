# -*- coding: utf-8 -*-
"""
menu

Menu item configuration, resolution and visibility helpers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .interfaces import ExpressionEvaluator, RequestContext, RouteGenerator
from .items import (
    ContainerItemConfig,
    EntityAction,
    EntityItemConfig,
    ItemConfig,
    MenuItemConfig,
    ResolvedMenuItem,
    RouteItemConfig,
    UrlItemConfig,
    active_trail,
)
from .resolver import MenuResolver
from .visibility import AccessChecker, MenuVisibilityFilter

__all__ = [
    "AccessChecker",
    "ContainerItemConfig",
    "EntityAction",
    "EntityItemConfig",
    "ExpressionEvaluator",
    "ItemConfig",
    "MenuItemConfig",
    "MenuResolver",
    "MenuVisibilityFilter",
    "RequestContext",
    "ResolvedMenuItem",
    "RouteGenerator",
    "RouteItemConfig",
    "UrlItemConfig",
    "active_trail",
]


# The End
