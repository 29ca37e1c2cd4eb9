"""Error handler infrastructure with single-class modules."""

from .binding_error import BindingError
from .category_hierarchy import CategoryHierarchy
from .decorators import MARKER_ATTRIBUTE, exception_handler, is_marked_handler
from .default_root_handler import DEFAULT_ROOT_HANDLER, DEFAULT_STATUS_CODE, DefaultRootHandler
from .error_handler import ErrorHandler
from .error_handler_error import FaultlineError
from .exception_handler import ExceptionHandler
from .explicit_hierarchy import ExplicitHierarchy
from .function_exception_handler import FunctionExceptionHandler
from .handler_binding import HANDLES_ATTRIBUTE, bound_category, describe_handler
from .handler_registry import HandlerRegistry, RegistryEntry, build_registry
from .handler_resolver import AncestorStep, HandlerResolver
from .handling_result import HandlingResult
from .invalid_hierarchy_error import InvalidHierarchyError
from .no_handler_error import NoHandlerError
from .null_failure_error import NullFailureError
from .type_hierarchy import TypeHierarchy

__all__ = [
    "DEFAULT_ROOT_HANDLER",
    "DEFAULT_STATUS_CODE",
    "HANDLES_ATTRIBUTE",
    "MARKER_ATTRIBUTE",
    "AncestorStep",
    "BindingError",
    "CategoryHierarchy",
    "DefaultRootHandler",
    "ErrorHandler",
    "ExceptionHandler",
    "ExplicitHierarchy",
    "FaultlineError",
    "FunctionExceptionHandler",
    "HandlerRegistry",
    "HandlerResolver",
    "HandlingResult",
    "InvalidHierarchyError",
    "NoHandlerError",
    "NullFailureError",
    "RegistryEntry",
    "TypeHierarchy",
    "bound_category",
    "build_registry",
    "describe_handler",
    "exception_handler",
    "is_marked_handler",
]
