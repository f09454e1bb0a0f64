# -*- coding: utf-8 -*-
"""
resolver

Resolve configured menu trees into per-request menu nodes.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List
from urllib.parse import urlsplit

from ..configuration.conf import FreeMenuSettings, current_settings
from ..exceptions import MenuDepthExceededError, UnsupportedItemError
from .interfaces import ExpressionEvaluator, RequestContext, RouteGenerator
from .items import (
    ContainerItemConfig,
    EntityItemConfig,
    ItemConfig,
    ResolvedMenuItem,
    RouteItemConfig,
    UrlItemConfig,
)

logger = logging.getLogger(__name__)


class MenuResolver:
    """Turn item configurations into resolved menu items for one request.

    The resolver keeps no state between calls apart from its collaborators:
    the request context it reads the current path and route from, the route
    generator used to build links and the evaluator used for active
    expressions. Route and expression failures propagate to the caller
    untouched, so a failing item aborts the whole resolution.
    """

    def __init__(
        self,
        request_context: RequestContext,
        route_generator: RouteGenerator,
        evaluator: ExpressionEvaluator,
        *,
        settings: FreeMenuSettings | None = None,
    ) -> None:
        """Store collaborators used while resolving menu trees."""

        self._request_context = request_context
        self._route_generator = route_generator
        self._evaluator = evaluator
        self._settings = settings or current_settings()

    def resolve(self, items: Iterable[ItemConfig]) -> List[ResolvedMenuItem]:
        """Return resolved menu items in the order of ``items``."""

        resolved = [self._resolve_item(item, 1) for item in items]
        logger.debug("Resolved %d root menu items", len(resolved))
        return resolved

    def _resolve_item(self, item: ItemConfig, depth: int) -> ResolvedMenuItem:
        if depth > self._settings.menu_max_depth:
            raise MenuDepthExceededError(self._settings.menu_max_depth)
        if isinstance(item, UrlItemConfig):
            return self._resolve_url_item(item)
        if isinstance(item, ContainerItemConfig):
            return self._resolve_container_item(item, depth)
        if isinstance(item, RouteItemConfig):
            return self._resolve_route_item(item)
        if isinstance(item, EntityItemConfig):
            return self._resolve_entity_item(item)
        raise UnsupportedItemError(item)

    def _resolve_url_item(self, item: UrlItemConfig) -> ResolvedMenuItem:
        # External links never take part in active-state detection.
        return ResolvedMenuItem(
            title=item.title,
            attributes=item.attributes,
            href=item.url,
            active=False,
            requires_granted=item.requires_granted,
        )

    def _resolve_container_item(
        self, item: ContainerItemConfig, depth: int
    ) -> ResolvedMenuItem:
        children = [self._resolve_item(child, depth + 1) for child in item.children]
        active = any(child.active for child in children)
        active = active or self.is_active(None, item.active_expression, item)
        return ResolvedMenuItem(
            title=item.title,
            attributes=item.attributes,
            href=None,
            active=active,
            children=children,
            requires_granted=item.requires_granted,
        )

    def _resolve_route_item(self, item: RouteItemConfig) -> ResolvedMenuItem:
        href = self._route_generator.generate(item.route, dict(item.route_params))
        return ResolvedMenuItem(
            title=item.title,
            attributes=item.attributes,
            href=href,
            active=self.is_active(href, item.active_expression, item),
            requires_granted=item.requires_granted,
        )

    def _resolve_entity_item(self, item: EntityItemConfig) -> ResolvedMenuItem:
        route = f"{self._settings.entity_route_prefix}{item.action}"
        route_params = dict(item.route_params)
        route_params[self._settings.entity_param] = item.entity
        href = self._route_generator.generate(route, route_params)
        return ResolvedMenuItem(
            title=item.title,
            attributes=item.attributes,
            href=href,
            active=self.is_active(href, item.active_expression, item),
            requires_granted=item.requires_granted,
        )

    def is_active(
        self,
        href: str | None,
        expression: str | None,
        item: ItemConfig,
    ) -> bool:
        """Return whether ``item`` corresponds to the current request."""

        if href:
            href_path = urlsplit(href).path
            if href_path == self._request_context.current_path():
                return True

        if expression:
            context = self.build_expression_context(href, item)
            result = self._evaluator.evaluate(expression, context)
            logger.debug("Expression %r for %r evaluated to %r", expression, item.title, result)
            return bool(result)

        return False

    def build_expression_context(
        self, href: str | None, item: ItemConfig
    ) -> Dict[str, Any]:
        """Return variables visible to active expressions of ``item``."""

        route_params = dict(self._request_context.current_route_params() or {})
        return {
            "request": self._request_context.current_request(),
            "route": self._request_context.current_route_name(),
            "route_params": route_params,
            "entity": route_params.get(self._settings.entity_param),
            "item": item,
            "href": href,
        }


__all__ = ["MenuResolver"]


# The End
