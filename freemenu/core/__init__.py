# -*- coding: utf-8 -*-
"""
core

Core menu resolution services for FreeMenu.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .dependencies import MenuResolverProvider
from .expressions import JinjaExpressionEvaluator
from .menu import MenuResolver, MenuVisibilityFilter

__all__ = [
    "JinjaExpressionEvaluator",
    "MenuResolver",
    "MenuResolverProvider",
    "MenuVisibilityFilter",
]


# The End
