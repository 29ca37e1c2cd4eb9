"""Discovery of the failure category a handler is bound to.

A handler states its category in one of three ways, checked in order:

1. an explicit ``handles`` attribute, set by
   :func:`~faultline.core.handlers.decorators.exception_handler`, by
   :class:`~faultline.core.handlers.function_exception_handler.FunctionExceptionHandler`
   or declared on the class;
2. the first type argument of a parameterised
   :class:`~faultline.core.handlers.exception_handler.ExceptionHandler` base;
3. for plain callables, the annotation of their first positional parameter.
"""

from __future__ import annotations

import functools
import inspect
import logging
import typing
from typing import Any, Hashable, Mapping, Optional

from .binding_error import BindingError
from .category_hierarchy import CategoryHierarchy
from .exception_handler import ExceptionHandler
from .function_exception_handler import FunctionExceptionHandler

logger = logging.getLogger(__name__)

HANDLES_ATTRIBUTE = "handles"

_MISSING = object()


def describe_handler(handler: Any) -> str:
    """Return a short label identifying ``handler`` in logs and errors."""

    if isinstance(handler, ExceptionHandler):
        return repr(handler)
    name = getattr(handler, "__qualname__", None) or getattr(handler, "__name__", None)
    return name or repr(handler)


def _explicit_tag(handler: Any) -> Any:
    return getattr(handler, HANDLES_ATTRIBUTE, _MISSING)


def _generic_argument(
    handler_class: type, bindings: Optional[Mapping[Any, Any]] = None
) -> Any:
    """Return the category declared through ``ExceptionHandler[...]``.

    Type variables are substituted with the arguments supplied by the
    subclasses below, so ``Sub(Base[KeyError])`` with
    ``Base(ExceptionHandler[T, str])`` binds to ``KeyError``.
    """

    bindings = bindings or {}
    for base in handler_class.__dict__.get("__orig_bases__", handler_class.__bases__):
        origin = typing.get_origin(base) or base
        if not (isinstance(origin, type) and issubclass(origin, ExceptionHandler)):
            continue

        arguments = tuple(
            bindings.get(argument, argument) if isinstance(argument, typing.TypeVar) else argument
            for argument in typing.get_args(base)
        )
        if origin is ExceptionHandler:
            if arguments and not isinstance(arguments[0], typing.TypeVar):
                return arguments[0]
            continue

        parameters = getattr(origin, "__parameters__", ())
        category = _generic_argument(origin, dict(zip(parameters, arguments)))
        if category is not _MISSING:
            return category
    return _MISSING


def _annotation_target(func: Any) -> Any:
    while isinstance(func, functools.partial):
        func = func.func
    if inspect.isfunction(func) or inspect.ismethod(func):
        return func
    return getattr(type(func), "__call__", func)


def _first_parameter_annotation(func: Any) -> Any:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return _MISSING

    positional = [
        parameter
        for parameter in signature.parameters.values()
        if parameter.kind
        in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    if not positional:
        return _MISSING

    parameter = positional[0]
    try:
        hints = typing.get_type_hints(_annotation_target(func))
    except Exception as error:
        raise BindingError(
            f"Could not evaluate the annotations of handler {describe_handler(func)}: {error}"
        ) from error

    return hints.get(parameter.name, _MISSING)


def _discover(handler: Any) -> Any:
    tag = _explicit_tag(handler)
    if tag is not _MISSING and tag is not None:
        return tag

    if isinstance(handler, FunctionExceptionHandler):
        return _first_parameter_annotation(handler.func)

    if isinstance(handler, ExceptionHandler):
        return _generic_argument(type(handler))

    if callable(handler):
        return _first_parameter_annotation(handler)

    return _MISSING


def bound_category(handler: Any, hierarchy: CategoryHierarchy) -> Hashable:
    """Return the category ``handler`` is bound to.

    Args:
        handler: An :class:`ExceptionHandler` instance or a plain callable.
        hierarchy: Hierarchy the category must belong to.

    Returns:
        The bound category.

    Raises:
        BindingError: If the handler is not callable, declares no category,
            or declares a value that is not a category of ``hierarchy``.
    """

    if handler is None:
        raise BindingError("Handlers must not be None")
    if isinstance(handler, type):
        raise BindingError(
            f"Handler {describe_handler(handler)} is a class; register an instance of it"
        )
    if not callable(handler):
        raise BindingError(f"Handler {describe_handler(handler)} is not callable")

    category: Optional[Any] = _discover(handler)
    if category is _MISSING or category is None:
        raise BindingError(
            f"Could not determine the failure category handled by {describe_handler(handler)}. "
            "Declare it with ExceptionHandler[...], a 'handles' attribute "
            "or an annotation on the first parameter"
        )

    if not hierarchy.is_category(category):
        raise BindingError(
            f"Handler {describe_handler(handler)} is bound to {category!r}, "
            f"which is not a category of {hierarchy!r}"
        )

    logger.debug(
        "Handler %s bound to %s", describe_handler(handler), hierarchy.describe(category)
    )
    return category


__all__ = ["HANDLES_ATTRIBUTE", "bound_category", "describe_handler"]
