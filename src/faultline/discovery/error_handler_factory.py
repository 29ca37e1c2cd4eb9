"""Construction of error handlers from scanned handler packages."""

from __future__ import annotations

import inspect
import logging
import threading
from typing import TYPE_CHECKING, Any, Optional

from faultline.core.handlers.category_hierarchy import CategoryHierarchy
from faultline.core.handlers.default_root_handler import DEFAULT_STATUS_CODE
from faultline.core.handlers.error_handler import ErrorHandler

from .ambiguous_handler_error import AmbiguousHandlerError
from .handler_instantiation_error import HandlerInstantiationError
from .handler_not_provided_error import HandlerNotProvidedError
from .handler_provider import HandlerProvider
from .package_scanner import PackageScanner

if TYPE_CHECKING:
    from faultline.config.settings import FaultlineSettings

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Could not create an error handler"


class ErrorHandlerFactory:
    """Create :class:`ErrorHandler` instances from handler packages.

    Discovered handler classes are instantiated once per package and cached,
    so repeated calls with the same packages reuse the same handler
    instances. The provider, when given, is asked first for each class; a
    fresh instance is built with the no-argument constructor when it has no
    instance or more than one. Marked functions are used as they are.

    Args:
        provider: Optional source of ready handler instances.
        scanner: Scanner used to discover handlers.
        hierarchy: Hierarchy handed to every created error handler.
        default_status_code: Status code of the fallback root handler.
    """

    def __init__(
        self,
        provider: Optional[HandlerProvider] = None,
        scanner: Optional[PackageScanner] = None,
        hierarchy: Optional[CategoryHierarchy] = None,
        default_status_code: int = DEFAULT_STATUS_CODE,
    ) -> None:
        self.provider = provider
        self.scanner = scanner or PackageScanner()
        self.hierarchy = hierarchy
        self.default_status_code = default_status_code
        self._cached_handlers: dict[str, list[Any]] = {}
        self._lock = threading.RLock()

    @property
    def cached_packages(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._cached_handlers)

    def reset_cache(self, *packages: str) -> None:
        """Forget cached handlers; all of them when no package is named."""

        with self._lock:
            if not packages:
                self._cached_handlers.clear()
                logger.debug("Cleared the handler cache")
                return
            for package in packages:
                self._cached_handlers.pop(package, None)
            logger.debug("Removed %s from the handler cache", list(packages))

    def create_error_handler(self, *packages: str) -> ErrorHandler:
        """Scan ``packages`` and build an error handler from every cached handler.

        Packages already scanned are served from the cache. The returned
        error handler also includes handlers cached by earlier calls for
        other packages.

        Raises:
            HandlerDiscoveryError: If a package cannot be imported.
            HandlerInstantiationError: If a handler class cannot be
                instantiated or the provider fails unexpectedly.
            BindingError: If a discovered handler has no category.
        """

        with self._lock:
            for package in packages:
                if package in self._cached_handlers:
                    continue
                handlers = [self._obtain(candidate) for candidate in self.scanner.scan(package)]
                self._cached_handlers[package] = handlers
                logger.info("Found %d exception handler(s) in package %s", len(handlers), package)

            handlers = [
                handler for cached in self._cached_handlers.values() for handler in cached
            ]

        return ErrorHandler(
            handlers, hierarchy=self.hierarchy, default_status_code=self.default_status_code
        )

    def _obtain(self, candidate: Any) -> Any:
        if not isinstance(candidate, type):
            return candidate

        provided = self._search_provider(candidate)
        if provided is not None:
            return provided
        return self._instantiate(candidate)

    def _search_provider(self, handler_class: type) -> Optional[Any]:
        if self.provider is None:
            return None

        try:
            handler = self.provider.get(handler_class)
        except AmbiguousHandlerError:
            logger.debug(
                "More than one instance provided for %s; creating a new one",
                handler_class.__qualname__,
            )
            return None
        except HandlerNotProvidedError:
            logger.debug(
                "No instance provided for %s; creating a new one", handler_class.__qualname__
            )
            return None
        except Exception as error:
            logger.error(
                "Unexpected error while looking up a provided instance of %s",
                handler_class.__qualname__,
                exc_info=True,
            )
            raise HandlerInstantiationError(f"{ERROR_MESSAGE}: {error}") from error

        logger.debug("Using provided instance of %s", handler_class.__qualname__)
        return handler

    @staticmethod
    def _instantiate(handler_class: type) -> Any:
        if inspect.isabstract(handler_class):
            logger.error("Exception handler class %s is abstract", handler_class.__qualname__)
            raise HandlerInstantiationError(
                f"{ERROR_MESSAGE}: {handler_class.__qualname__} is abstract"
            )

        try:
            inspect.signature(handler_class).bind()
        except TypeError as error:
            logger.error(
                "Exception handler class %s has no usable no-argument constructor",
                handler_class.__qualname__,
            )
            raise HandlerInstantiationError(
                f"{ERROR_MESSAGE}: {handler_class.__qualname__} cannot be built without arguments"
            ) from error
        except ValueError:
            pass

        try:
            return handler_class()
        except Exception as error:
            logger.error(
                "Exception handler class %s raised while being instantiated",
                handler_class.__qualname__,
                exc_info=True,
            )
            raise HandlerInstantiationError(f"{ERROR_MESSAGE}: {error}") from error


def create_error_handler_from_settings(
    settings: "FaultlineSettings",
    provider: Optional[HandlerProvider] = None,
    hierarchy: Optional[CategoryHierarchy] = None,
) -> ErrorHandler:
    """Build an error handler for the packages listed in ``settings``."""

    factory = ErrorHandlerFactory(
        provider=provider,
        hierarchy=hierarchy,
        default_status_code=settings.default_status_code,
    )
    return factory.create_error_handler(*settings.base_packages)


__all__ = ["ErrorHandlerFactory", "create_error_handler_from_settings"]
