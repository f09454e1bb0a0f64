# -*- coding: utf-8 -*-
"""
visibility

Prune resolved menus according to an access check.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Sequence

from .items import ResolvedMenuItem

AccessChecker = Callable[[Sequence[str]], bool]


class MenuVisibilityFilter:
    """Drop resolved menu nodes the current user may not see."""

    def __init__(self, checker: AccessChecker) -> None:
        """Store the ``checker`` consulted for restricted nodes."""

        self._checker = checker
        self.logger = logging.getLogger(__name__)

    def apply(self, items: Iterable[ResolvedMenuItem]) -> List[ResolvedMenuItem]:
        """Return visible nodes of ``items`` preserving their order."""

        visible: List[ResolvedMenuItem] = []
        for item in items:
            filtered = self._filter_item(item)
            if filtered is not None:
                visible.append(filtered)
        return visible

    def is_granted(self, item: ResolvedMenuItem) -> bool:
        """Return ``True`` when ``item`` is unrestricted or granted."""

        if not item.requires_granted:
            return True
        return bool(self._checker(item.requires_granted))

    def _filter_item(self, item: ResolvedMenuItem) -> ResolvedMenuItem | None:
        if not self.is_granted(item):
            self.logger.debug(
                "Hiding menu item %r requiring %s", item.title, list(item.requires_granted)
            )
            return None
        if not item.children:
            return item
        children = self.apply(item.children)
        if not children:
            return None
        if len(children) == len(item.children):
            return item
        return ResolvedMenuItem(
            title=item.title,
            attributes=item.attributes,
            href=item.href,
            active=item.active,
            children=children,
            requires_granted=item.requires_granted,
        )


__all__ = ["AccessChecker", "MenuVisibilityFilter"]


# The End
