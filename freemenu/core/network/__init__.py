# -*- coding: utf-8 -*-
"""
network

Routing integration for menu resolution.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .routing import StarletteRouteGenerator, iter_routes

__all__ = ["StarletteRouteGenerator", "iter_routes"]


# The End
