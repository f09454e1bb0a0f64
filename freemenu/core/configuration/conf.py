# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the FreeMenu package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Mapping


@dataclass
class FreeMenuSettings:
    """Container for menu configuration derived from environment variables.

    ``menu_max_depth`` is a safety cap against runaway nesting, not a
    structural limit of menu trees: resolution works for any depth below it
    and the cap may be raised freely.
    """

    entity_route_prefix: str = "admin_"
    entity_param: str = "admin_entity"
    menu_max_depth: int = 32
    expression_cache_size: int = 256
    strict_expressions: bool = True

    def __post_init__(self) -> None:
        """Normalize values that would otherwise break route generation."""
        self.entity_route_prefix = (self.entity_route_prefix or "").strip()
        self.entity_param = (self.entity_param or "").strip() or "admin_entity"
        if self.menu_max_depth < 1:
            self.menu_max_depth = 1
        if self.expression_cache_size < 0:
            self.expression_cache_size = 0

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "FREEMENU_",
    ) -> "FreeMenuSettings":
        """Build a settings instance from environment variables."""
        source = os.environ if env is None else env
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        entity_route_prefix = data.get("ENTITY_ROUTE_PREFIX")
        if entity_route_prefix is None:
            entity_route_prefix = "admin_"
        entity_param = data.get("ENTITY_PARAM") or "admin_entity"
        max_depth = cls._to_int(data.get("MENU_MAX_DEPTH"), default=32)
        cache_size = cls._to_int(data.get("EXPRESSION_CACHE_SIZE"), default=256)
        strict = cls._to_bool(data.get("STRICT_EXPRESSIONS"), default=True)
        return cls(
            entity_route_prefix=entity_route_prefix,
            entity_param=entity_param,
            menu_max_depth=max_depth,
            expression_cache_size=cache_size,
            strict_expressions=strict,
        )

    @staticmethod
    def _to_int(value: str | None, *, default: int) -> int:
        """Return an integer from ``value`` or ``default`` when conversion fails."""
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default


class _ActiveSettings:
    """Hold the settings instance shared by FreeMenu components."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._settings: FreeMenuSettings | None = None

    def install(self, settings: FreeMenuSettings | None) -> None:
        with self._lock:
            self._settings = settings

    def get(self) -> FreeMenuSettings:
        with self._lock:
            if self._settings is None:
                self._settings = FreeMenuSettings.from_env()
            return self._settings


_active_settings = _ActiveSettings()


def configure(settings: FreeMenuSettings) -> None:
    """Install application specific settings.

    Components created without explicit settings read the active instance
    when they resolve a menu, so reconfiguration needs no notification.
    """
    _active_settings.install(settings)


def current_settings() -> FreeMenuSettings:
    """Return the active settings, reading the environment on first use."""
    return _active_settings.get()


def reset_settings() -> None:
    """Forget the configured settings so the environment is read again."""
    _active_settings.install(None)


__all__ = [
    "FreeMenuSettings",
    "configure",
    "current_settings",
    "reset_settings",
]


# The End
