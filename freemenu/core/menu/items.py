# -*- coding: utf-8 -*-
"""
items

Dataclasses describing configured menu items and their resolved form.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Sequence, Tuple, Union


class EntityAction(str, Enum):
    """Actions exposed for every administered entity."""

    LIST = "list"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"


def _freeze_mapping(value: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(value or {}))


@dataclass(frozen=True)
class MenuItemConfig:
    """Common fields shared by every configured menu item."""

    title: str
    attributes: Mapping[str, str] = field(default_factory=dict, kw_only=True)
    requires_granted: Tuple[str, ...] = field(default=(), kw_only=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze_mapping(self.attributes))
        object.__setattr__(self, "requires_granted", tuple(self.requires_granted))


@dataclass(frozen=True)
class UrlItemConfig(MenuItemConfig):
    """Link pointing at a verbatim URL, usually outside the admin."""

    url: str


@dataclass(frozen=True)
class RouteItemConfig(MenuItemConfig):
    """Link generated from a named route."""

    route: str
    route_params: Mapping[str, Any] = field(default_factory=dict)
    active_expression: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "route_params", _freeze_mapping(self.route_params))


@dataclass(frozen=True)
class EntityItemConfig(MenuItemConfig):
    """Link to one of the standard actions of an administered entity."""

    entity: str
    action: str = EntityAction.LIST.value
    route_params: Mapping[str, Any] = field(default_factory=dict)
    active_expression: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        action = self.action.value if isinstance(self.action, EntityAction) else str(self.action)
        object.__setattr__(self, "action", action)
        object.__setattr__(self, "route_params", _freeze_mapping(self.route_params))


@dataclass(frozen=True)
class ContainerItemConfig(MenuItemConfig):
    """Group of nested menu items without a link of its own."""

    children: Tuple["ItemConfig", ...] = ()
    active_expression: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "children", tuple(self.children))


ItemConfig = Union[UrlItemConfig, RouteItemConfig, EntityItemConfig, ContainerItemConfig]


@dataclass(frozen=True)
class ResolvedMenuItem:
    """Menu node computed for a single request and ready for rendering."""

    title: str
    attributes: Mapping[str, str]
    href: str | None
    active: bool
    children: Tuple["ResolvedMenuItem", ...] = ()
    requires_granted: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", _freeze_mapping(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "requires_granted", tuple(self.requires_granted))

    @property
    def is_container(self) -> bool:
        """Return ``True`` when the node groups children instead of linking."""

        return self.href is None

    def iter_active(self) -> Iterator["ResolvedMenuItem"]:
        """Yield this node and its active descendants in pre-order."""

        if not self.active:
            return
        yield self
        for child in self.children:
            yield from child.iter_active()

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain representation suitable for templates and JSON."""

        return {
            "title": self.title,
            "attributes": dict(self.attributes),
            "href": self.href,
            "active": self.active,
            "children": [child.to_dict() for child in self.children],
            "requires_granted": list(self.requires_granted),
        }


def active_trail(items: Sequence[ResolvedMenuItem]) -> list[ResolvedMenuItem]:
    """Return the chain of active nodes, e.g. for breadcrumbs."""

    for item in items:
        if item.active:
            return list(item.iter_active())
    return []


__all__ = [
    "ContainerItemConfig",
    "EntityAction",
    "EntityItemConfig",
    "ItemConfig",
    "MenuItemConfig",
    "ResolvedMenuItem",
    "RouteItemConfig",
    "UrlItemConfig",
    "active_trail",
]


# The End
