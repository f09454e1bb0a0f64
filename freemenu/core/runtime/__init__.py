# -*- coding: utf-8 -*-
"""
runtime

Request-scoped runtime helpers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .context import (
    CurrentRequestContext,
    RequestContextMiddleware,
    StarletteRequestContext,
    current_request_context,
    pop_request,
    push_request,
)

__all__ = [
    "CurrentRequestContext",
    "RequestContextMiddleware",
    "StarletteRequestContext",
    "current_request_context",
    "pop_request",
    "push_request",
]


# The End
