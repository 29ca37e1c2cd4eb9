"""Category hierarchy backed by Python exception classes."""

from __future__ import annotations

from typing import Any, Optional

from .category_hierarchy import CategoryHierarchy


class TypeHierarchy(CategoryHierarchy):
    """Classify failures by their exception class.

    The root category is :class:`BaseException`. Ancestors follow the method
    resolution order restricted to exception classes, so a class deriving
    from several exception types still has a single, totally ordered chain:
    its MRO. Mixins that are not exceptions are skipped and cannot be bound
    to a handler.

    :meth:`ancestors` is authoritative. Under multiple inheritance,
    following :meth:`parent_of` repeatedly can skip bases that the MRO
    ranks as ancestors. Resolution only uses :meth:`ancestors`.
    """

    @property
    def root(self) -> type[BaseException]:
        return BaseException

    def category_of(self, instance: Any) -> type:
        return type(instance)

    def is_category(self, value: Any) -> bool:
        return isinstance(value, type) and issubclass(value, BaseException)

    def ancestors(self, category: Any) -> tuple[type, ...]:
        mro = getattr(category, "__mro__", None)
        if mro is None:
            return (category,)
        return tuple(klass for klass in mro if issubclass(klass, BaseException)) or (category,)

    def parent_of(self, category: Any) -> Optional[type]:
        """Return the next exception class in the MRO of ``category``."""

        chain = self.ancestors(category)
        return chain[1] if len(chain) > 1 else None

    def describe(self, category: Any) -> str:
        module = getattr(category, "__module__", None)
        qualname = getattr(category, "__qualname__", None)
        if qualname is None:
            return str(category)
        if module in (None, "builtins"):
            return qualname
        return f"{module}.{qualname}"

    def __repr__(self) -> str:
        return "TypeHierarchy(root=BaseException)"


__all__ = ["TypeHierarchy"]
