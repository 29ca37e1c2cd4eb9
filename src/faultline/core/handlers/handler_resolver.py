"""Selection of the most specific handler for a failure.

Resolution walks the ancestor chain of the failure's concrete category, leaf
first. The position of a category in that chain is its distance from the
failure, so the first registered category met on the walk is the candidate
with the minimum distance. The chain is totally ordered and the registry holds
one entry per category, so the winner is always unique.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from .handler_registry import HandlerRegistry, RegistryEntry
from .no_handler_error import NoHandlerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AncestorStep:
    """One category of an ancestor chain as seen by the resolver.

    Attributes:
        category: Category at this position of the chain.
        distance: Number of parent hops from the concrete category.
        entry: Registry entry bound to the category, if any.
    """

    category: Hashable
    distance: int
    entry: Optional[RegistryEntry] = None


class HandlerResolver:
    """Resolve failures against an immutable :class:`HandlerRegistry`.

    The resolver holds no mutable state, so a single instance may serve
    concurrent callers.
    """

    def __init__(self, registry: HandlerRegistry) -> None:
        self.registry = registry

    def explain(self, category: Hashable) -> tuple[AncestorStep, ...]:
        """Return the ancestor chain of ``category`` annotated for inspection."""

        return tuple(
            AncestorStep(ancestor, distance, self.registry.get(ancestor))
            for distance, ancestor in enumerate(self.registry.hierarchy.ancestors(category))
        )

    def resolve_category(self, category: Hashable) -> RegistryEntry:
        """Return the entry whose category is the nearest ancestor of ``category``.

        Raises:
            NoHandlerError: If no ancestor of ``category``, the root
                included, has an entry. This means the hierarchy is broken.
        """

        hierarchy = self.registry.hierarchy
        for distance, ancestor in enumerate(hierarchy.ancestors(category)):
            entry = self.registry.get(ancestor)
            if entry is not None:
                logger.debug(
                    "Resolved %s to handler for %s at distance %d",
                    hierarchy.describe(category),
                    hierarchy.describe(ancestor),
                    distance,
                )
                return entry

        logger.error(
            "No handler found for %s, not even for the root category %s",
            hierarchy.describe(category),
            hierarchy.describe(hierarchy.root),
        )
        raise NoHandlerError(
            f"No handler registered for {hierarchy.describe(category)!s} or any of its ancestors. "
            f"Is {hierarchy.describe(category)!s} part of {hierarchy!r}?"
        )

    def resolve(self, instance: Any) -> RegistryEntry:
        """Return the registry entry selected for a failure instance."""

        return self.resolve_category(self.registry.hierarchy.category_of(instance))

    def resolve_handler(self, instance: Any) -> Callable[[Any], Any]:
        """Return the handler selected for a failure instance."""

        return self.resolve(instance).handler


__all__ = ["AncestorStep", "HandlerResolver"]
