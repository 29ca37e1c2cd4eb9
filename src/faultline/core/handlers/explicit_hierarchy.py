"""Category hierarchy described by an explicit parent table.

Applications that classify failures by keys rather than by class (error codes,
enum members, service names) describe the tree once and pass it to the error
handler. The table is validated when the hierarchy is built so resolution can
rely on the single-rooted, acyclic shape.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Hashable, Mapping, Optional

from .category_hierarchy import CategoryHierarchy
from .invalid_hierarchy_error import InvalidHierarchyError

logger = logging.getLogger(__name__)


def _category_attribute(instance: Any) -> Any:
    return getattr(instance, "category", None)


class ExplicitHierarchy(CategoryHierarchy):
    """Hierarchy built from a ``{category: parent}`` mapping.

    Args:
        parents: Parent of every category. The root maps to ``None``.
        categorize: Callable returning the category of a failure instance.
            Defaults to reading the instance's ``category`` attribute.

    Raises:
        InvalidHierarchyError: If the table has no root or several roots,
            references undeclared parents, or contains a cycle.

    Example::

        hierarchy = ExplicitHierarchy(
            {"error": None, "client": "error", "not_found": "client"}
        )
        hierarchy.ancestors("not_found")  # ("not_found", "client", "error")
    """

    def __init__(
        self,
        parents: Mapping[Hashable, Optional[Hashable]],
        categorize: Optional[Callable[[Any], Hashable]] = None,
    ) -> None:
        self._parents = MappingProxyType(dict(parents))
        self._categorize = categorize or _category_attribute
        self._root = self._validate(self._parents)
        logger.debug(
            "Explicit hierarchy with %d categories rooted at %r",
            len(self._parents),
            self._root,
        )

    @staticmethod
    def _validate(parents: Mapping[Hashable, Optional[Hashable]]) -> Hashable:
        roots = [category for category, parent in parents.items() if parent is None]
        if not roots:
            raise InvalidHierarchyError("The hierarchy has no root category")
        if len(roots) > 1:
            raise InvalidHierarchyError(f"The hierarchy has more than one root: {roots!r}")

        for category, parent in parents.items():
            if parent is not None and parent not in parents:
                raise InvalidHierarchyError(
                    f"Parent {parent!r} of category {category!r} is not a declared category"
                )

        # Every walk must reach the root within len(parents) steps.
        for category in parents:
            seen = {category}
            parent = parents[category]
            while parent is not None:
                if parent in seen:
                    raise InvalidHierarchyError(
                        f"Cycle detected in the hierarchy through category {parent!r}"
                    )
                seen.add(parent)
                parent = parents[parent]

        return roots[0]

    @property
    def root(self) -> Hashable:
        return self._root

    @property
    def parents(self) -> Mapping[Hashable, Optional[Hashable]]:
        """Read-only view of the parent table."""

        return self._parents

    def category_of(self, instance: Any) -> Hashable:
        return self._categorize(instance)

    def parent_of(self, category: Hashable) -> Optional[Hashable]:
        try:
            return self._parents.get(category)
        except TypeError:
            # Unhashable values are not categories.
            return None

    def is_category(self, value: Any) -> bool:
        try:
            return value in self._parents
        except TypeError:
            return False

    def __contains__(self, category: object) -> bool:
        return self.is_category(category)

    def __len__(self) -> int:
        return len(self._parents)

    def __repr__(self) -> str:
        return f"ExplicitHierarchy(root={self._root!r}, categories={len(self._parents)})"


__all__ = ["ExplicitHierarchy"]
