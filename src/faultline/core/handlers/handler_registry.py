"""Registry of handlers keyed by the failure category they are bound to.

:func:`build_registry` turns the ordered list of handlers supplied by the
application into an immutable :class:`HandlerRegistry` holding at most one
entry per category and always one entry for the root category.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Hashable, Iterable, Iterator, Mapping, Optional

from .category_hierarchy import CategoryHierarchy
from .default_root_handler import DEFAULT_ROOT_HANDLER, DEFAULT_STATUS_CODE, DefaultRootHandler
from .handler_binding import bound_category, describe_handler
from .type_hierarchy import TypeHierarchy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """A handler together with the category it is bound to.

    Attributes:
        category: Failure category key.
        handler: Callable returning a handling result for the category.
        default: Whether the entry was synthesised for the root category.
    """

    category: Hashable
    handler: Callable[[Any], Any]
    default: bool = False


class HandlerRegistry:
    """Immutable set of registry entries, one per category.

    Instances are produced by :func:`build_registry`; they expose a
    read-only mapping interface keyed by category.

    Attributes:
        hierarchy: Hierarchy the categories belong to.
        discarded: Entries dropped because an earlier handler claimed the
            same category, in input order.
        default_used: Whether the root entry was synthesised.
    """

    def __init__(
        self,
        entries: Mapping[Hashable, RegistryEntry],
        hierarchy: CategoryHierarchy,
        discarded: tuple[RegistryEntry, ...] = (),
    ) -> None:
        self._entries = MappingProxyType(dict(entries))
        self.hierarchy = hierarchy
        self.discarded = discarded
        self.default_used = self._entries[hierarchy.root].default

    def get(self, category: Hashable) -> Optional[RegistryEntry]:
        """Return the entry bound to ``category`` if any."""

        try:
            return self._entries.get(category)
        except TypeError:
            return None

    def categories(self) -> tuple[Hashable, ...]:
        """Return the registered categories in registration order."""

        return tuple(self._entries)

    def entries(self) -> tuple[RegistryEntry, ...]:
        """Return the registered entries in registration order."""

        return tuple(self._entries.values())

    @property
    def root_entry(self) -> RegistryEntry:
        """Return the entry bound to the root category."""

        return self._entries[self.hierarchy.root]

    def __contains__(self, category: object) -> bool:
        return self.get(category) is not None  # type: ignore[arg-type]

    def __getitem__(self, category: Hashable) -> RegistryEntry:
        return self._entries[category]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        labels = ", ".join(self.hierarchy.describe(category) for category in self._entries)
        return f"HandlerRegistry([{labels}])"


def build_registry(
    handlers: Iterable[Any],
    hierarchy: Optional[CategoryHierarchy] = None,
    default_status_code: int = DEFAULT_STATUS_CODE,
) -> HandlerRegistry:
    """Build a registry from an ordered collection of handlers.

    Args:
        handlers: Handlers in priority order. The collection is not modified.
        hierarchy: Hierarchy used to bind and validate categories. Defaults
            to :class:`TypeHierarchy`.
        default_status_code: Status code of the synthesised root handler.

    Returns:
        The registry. It holds one entry per category; when several handlers
        share a category the first one in input order wins and the others
        are logged and listed in :attr:`HandlerRegistry.discarded`. When no
        handler is bound to the root category a :class:`DefaultRootHandler`
        is added for it.

    Raises:
        BindingError: If the category of any handler cannot be determined.
    """

    hierarchy = hierarchy or TypeHierarchy()
    entries: dict[Hashable, RegistryEntry] = {}
    discarded: list[RegistryEntry] = []

    for handler in handlers:
        entry = RegistryEntry(bound_category(handler, hierarchy), handler)
        winner = entries.get(entry.category)
        if winner is None:
            entries[entry.category] = entry
            continue

        discarded.append(entry)
        logger.warning(
            "More than one handler for category %s. %s will be used, %s is ignored",
            hierarchy.describe(entry.category),
            describe_handler(winner.handler),
            describe_handler(handler),
        )

    if hierarchy.root not in entries:
        logger.warning(
            "No handler registered for the root category %s; using default",
            hierarchy.describe(hierarchy.root),
        )
        default_handler = (
            DEFAULT_ROOT_HANDLER
            if default_status_code == DEFAULT_STATUS_CODE
            else DefaultRootHandler(default_status_code)
        )
        entries[hierarchy.root] = RegistryEntry(hierarchy.root, default_handler, default=True)

    return HandlerRegistry(entries, hierarchy, tuple(discarded))


__all__ = ["HandlerRegistry", "RegistryEntry", "build_registry"]
