"""Tests for the ``exception_handler`` marker decorator."""

import pytest

from faultline.core.handlers import (
    ExceptionHandler,
    HandlingResult,
    TypeHierarchy,
    bound_category,
    exception_handler,
    is_marked_handler,
)


def test_marks_handler_class_without_changing_it():
    @exception_handler()
    class KeyErrorHandler(ExceptionHandler[KeyError, str]):
        def handle(self, exception):
            return HandlingResult.with_payload(404, "key")

    assert is_marked_handler(KeyErrorHandler)
    assert KeyErrorHandler().handle(KeyError()) == HandlingResult.with_payload(404, "key")


def test_marker_is_not_inherited_by_subclasses():
    @exception_handler()
    class Parent(ExceptionHandler[KeyError, str]):
        def handle(self, exception):
            return HandlingResult.just_status(404)

    class Child(Parent):
        pass

    assert is_marked_handler(Parent)
    assert not is_marked_handler(Child)


def test_explicit_category_is_recorded():
    @exception_handler(LookupError)
    def lookup_handler(exception):
        return HandlingResult.just_status(404)

    assert is_marked_handler(lookup_handler)
    assert bound_category(lookup_handler, TypeHierarchy()) is LookupError


def test_bare_decorator_usage_is_rejected():
    with pytest.raises(TypeError, match="must be called"):

        @exception_handler
        def handler(exception: KeyError):
            return HandlingResult.just_status(404)


def test_classes_must_implement_the_handler_interface():
    with pytest.raises(TypeError, match="must implement ExceptionHandler"):

        @exception_handler()
        class NotAHandler:
            pass
