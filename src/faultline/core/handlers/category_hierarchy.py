"""Strategy interface describing a single-rooted failure hierarchy.

The dispatch engine never inspects classes directly. It asks a
:class:`CategoryHierarchy` for the category of a failure and for the chain of
ancestors of that category, which keeps the resolution algorithm identical for
exception classes and for applications that classify failures by explicit keys.
"""

from __future__ import annotations

import abc
from typing import Any, Hashable, Optional


class CategoryHierarchy(abc.ABC):
    """Contract for hierarchies used to classify failures.

    Implementations must describe a single-rooted, acyclic, finite-depth
    parent relation: every category except :attr:`root` has exactly one
    parent.
    """

    @property
    @abc.abstractmethod
    def root(self) -> Hashable:
        """Return the universal category that is an ancestor of every other."""

    @abc.abstractmethod
    def category_of(self, instance: Any) -> Hashable:
        """Return the concrete category of a failure instance."""

    @abc.abstractmethod
    def parent_of(self, category: Hashable) -> Optional[Hashable]:
        """Return the parent of ``category`` or ``None`` when it has none."""

    @abc.abstractmethod
    def is_category(self, value: Any) -> bool:
        """Return whether ``value`` may be used as a registry key."""

    def is_root(self, category: Hashable) -> bool:
        """Return whether ``category`` is the root category."""

        return category == self.root

    def ancestors(self, category: Hashable) -> tuple[Hashable, ...]:
        """Return ``category`` followed by its ancestors, nearest first.

        The position of a category in the returned tuple is its distance
        from ``category``. The chain ends at the root for well-formed
        hierarchies; a chain that stops short of it signals a category that
        escapes the hierarchy.
        """

        chain = [category]
        parent = self.parent_of(category)
        while parent is not None:
            chain.append(parent)
            parent = self.parent_of(parent)
        return tuple(chain)

    def describe(self, category: Hashable) -> str:
        """Return a human readable label for ``category``."""

        return str(category)


__all__ = ["CategoryHierarchy"]
