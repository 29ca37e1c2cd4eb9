"""Tests for the exception class hierarchy."""

from faultline.core.handlers import TypeHierarchy


class Outer:
    class NestedError(ValueError):
        pass


def test_root_and_category_of():
    hierarchy = TypeHierarchy()

    assert hierarchy.root is BaseException
    assert hierarchy.category_of(KeyError("x")) is KeyError


def test_ancestors_end_at_root():
    chain = TypeHierarchy().ancestors(KeyError)

    assert chain == (KeyError, LookupError, Exception, BaseException)
    assert TypeHierarchy().parent_of(KeyError) is LookupError
    assert TypeHierarchy().parent_of(BaseException) is None


def test_only_exception_classes_are_categories():
    hierarchy = TypeHierarchy()

    assert hierarchy.is_category(OSError)
    assert not hierarchy.is_category(OSError())
    assert not hierarchy.is_category(int)
    assert not hierarchy.is_category("KeyError")


def test_describe_includes_module_for_non_builtins():
    hierarchy = TypeHierarchy()

    assert hierarchy.describe(KeyError) == "KeyError"
    assert hierarchy.describe(Outer.NestedError) == f"{__name__}.Outer.NestedError"


class Both(KeyError, ValueError):
    pass


def test_multiple_inheritance_chain_is_the_mro():
    hierarchy = TypeHierarchy()

    assert hierarchy.ancestors(Both) == (
        Both,
        KeyError,
        LookupError,
        ValueError,
        Exception,
        BaseException,
    )
    assert hierarchy.parent_of(Both) is KeyError
