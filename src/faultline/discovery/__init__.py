"""Handler discovery and error handler construction."""

from .ambiguous_handler_error import AmbiguousHandlerError
from .error_handler_factory import ErrorHandlerFactory, create_error_handler_from_settings
from .handler_discovery_error import HandlerDiscoveryError
from .handler_instantiation_error import HandlerInstantiationError
from .handler_not_provided_error import HandlerNotProvidedError
from .handler_provider import HandlerProvider, InstanceProvider
from .package_scanner import PackageScanner

__all__ = [
    "AmbiguousHandlerError",
    "ErrorHandlerFactory",
    "HandlerDiscoveryError",
    "HandlerInstantiationError",
    "HandlerNotProvidedError",
    "HandlerProvider",
    "InstanceProvider",
    "PackageScanner",
    "create_error_handler_from_settings",
]
