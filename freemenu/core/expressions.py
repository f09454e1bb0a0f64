# -*- coding: utf-8 -*-
"""
expressions

Sandboxed Jinja expression evaluation for menu active states.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from threading import RLock
from typing import Any, Callable, Mapping

from jinja2 import StrictUndefined, TemplateError, Undefined
from jinja2.sandbox import SandboxedEnvironment

from .configuration.conf import FreeMenuSettings, current_settings
from .exceptions import ExpressionEvaluationError

logger = logging.getLogger(__name__)

CompiledExpression = Callable[..., Any]


class JinjaExpressionEvaluator:
    """Evaluate boolean expressions such as ``entity == 'Order'``.

    Expressions use the Jinja expression grammar (``and``, ``or``, ``not``,
    comparisons, ``in``, attribute and item access) and run inside a
    sandboxed environment. Compiled expressions are kept in a small LRU
    cache keyed by their source.
    """

    def __init__(
        self,
        *,
        settings: FreeMenuSettings | None = None,
        environment: SandboxedEnvironment | None = None,
    ) -> None:
        """Prepare the sandboxed environment and the compiled expression cache."""

        self._settings = settings or current_settings()
        self._strict = self._settings.strict_expressions
        if environment is None:
            undefined = StrictUndefined if self._strict else Undefined
            environment = SandboxedEnvironment(undefined=undefined)
        self._environment = environment
        self._cache_size = self._settings.expression_cache_size
        self._cache: "OrderedDict[str, CompiledExpression]" = OrderedDict()
        self._lock = RLock()

    @property
    def environment(self) -> SandboxedEnvironment:
        """Return the Jinja environment used for compilation."""

        return self._environment

    def evaluate(self, source: str, context: Mapping[str, Any]) -> Any:
        """Evaluate ``source`` with ``context`` bound as expression variables."""

        compiled = self.compile(source)
        try:
            result = compiled(**dict(context))
        except TemplateError as exc:
            raise ExpressionEvaluationError(source, str(exc)) from exc
        except (TypeError, ValueError, ArithmeticError, LookupError, AttributeError) as exc:
            raise ExpressionEvaluationError(source, str(exc)) from exc
        if self._strict and isinstance(result, Undefined):
            raise ExpressionEvaluationError(source, "expression result is undefined")
        return result

    def compile(self, source: str) -> CompiledExpression:
        """Return the compiled callable for ``source``, using the cache."""

        with self._lock:
            compiled = self._cache.get(source)
            if compiled is not None:
                self._cache.move_to_end(source)
                return compiled
        try:
            compiled = self._environment.compile_expression(source, undefined_to_none=False)
        except TemplateError as exc:
            raise ExpressionEvaluationError(source, str(exc)) from exc
        logger.debug("Compiled menu expression %r", source)
        if self._cache_size:
            with self._lock:
                self._cache[source] = compiled
                while len(self._cache) > self._cache_size:
                    self._cache.popitem(last=False)
        return compiled

    def clear(self) -> None:
        """Drop all compiled expressions."""

        with self._lock:
            self._cache.clear()


__all__ = ["JinjaExpressionEvaluator"]


# The End
