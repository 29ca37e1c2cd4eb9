"""faultline: dispatch failures to the handler bound to their nearest category."""

__version__ = "0.1.0"

from faultline.config import ConfigurationError, FaultlineSettings, load_settings
from faultline.core.handlers import (
    BindingError,
    CategoryHierarchy,
    DefaultRootHandler,
    ErrorHandler,
    ExceptionHandler,
    ExplicitHierarchy,
    FaultlineError,
    FunctionExceptionHandler,
    HandlingResult,
    InvalidHierarchyError,
    NoHandlerError,
    NullFailureError,
    TypeHierarchy,
    build_registry,
    exception_handler,
)
from faultline.discovery import (
    AmbiguousHandlerError,
    ErrorHandlerFactory,
    HandlerDiscoveryError,
    HandlerInstantiationError,
    HandlerNotProvidedError,
    InstanceProvider,
    PackageScanner,
    create_error_handler_from_settings,
)

__all__ = [
    "__version__",
    "AmbiguousHandlerError",
    "BindingError",
    "CategoryHierarchy",
    "ConfigurationError",
    "DefaultRootHandler",
    "ErrorHandler",
    "ErrorHandlerFactory",
    "ExceptionHandler",
    "ExplicitHierarchy",
    "FaultlineError",
    "FaultlineSettings",
    "FunctionExceptionHandler",
    "HandlerDiscoveryError",
    "HandlerInstantiationError",
    "HandlerNotProvidedError",
    "HandlingResult",
    "InstanceProvider",
    "InvalidHierarchyError",
    "NoHandlerError",
    "NullFailureError",
    "PackageScanner",
    "TypeHierarchy",
    "build_registry",
    "create_error_handler_from_settings",
    "exception_handler",
    "load_settings",
]
