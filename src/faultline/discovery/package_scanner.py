"""Discovery of marked handlers inside importable packages."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from types import ModuleType
from typing import Any, Iterator

from faultline.core.handlers.decorators import is_marked_handler

from .handler_discovery_error import HandlerDiscoveryError

logger = logging.getLogger(__name__)


class PackageScanner:
    """Collect objects marked with :func:`~faultline.core.handlers.exception_handler`.

    A package is imported together with every submodule below it. Only objects
    defined in the module being inspected are returned, so a handler imported
    into several modules is reported once.
    """

    def scan(self, package_name: str) -> list[Any]:
        """Return the marked handler classes and functions of ``package_name``.

        Args:
            package_name: Dotted name of a package or a plain module.

        Returns:
            Marked objects ordered by module name, then by definition order
            inside each module.

        Raises:
            HandlerDiscoveryError: If the package or one of its submodules
                cannot be imported.
        """

        found: list[Any] = []
        for module in sorted(self._modules(package_name), key=lambda module: module.__name__):
            found.extend(self._collect_handlers(module))

        logger.debug("Found %d handler(s) in %s", len(found), package_name)
        return found

    def _modules(self, package_name: str) -> Iterator[ModuleType]:
        root = self._import(package_name)
        yield root

        search_path = getattr(root, "__path__", None)
        if search_path is None:
            return

        def _on_error(name: str) -> None:
            raise HandlerDiscoveryError(f"Could not import module {name} while scanning {package_name}")

        # walk_packages imports subpackages itself to find their children.
        try:
            names = [
                module_info.name
                for module_info in pkgutil.walk_packages(
                    search_path, prefix=f"{root.__name__}.", onerror=_on_error
                )
            ]
        except HandlerDiscoveryError:
            raise
        except Exception as error:
            raise HandlerDiscoveryError(f"Could not scan package {package_name}: {error}") from error

        for name in names:
            yield self._import(name)

    @staticmethod
    def _import(module_name: str) -> ModuleType:
        try:
            return importlib.import_module(module_name)
        except Exception as error:
            raise HandlerDiscoveryError(f"Could not import module {module_name}: {error}") from error

    @staticmethod
    def _collect_handlers(module: ModuleType) -> list[Any]:
        """Collect marked objects defined directly in ``module``."""

        collected: list[Any] = []
        seen: set[int] = set()
        for candidate in vars(module).values():
            if id(candidate) in seen or not is_marked_handler(candidate):
                continue
            if getattr(candidate, "__module__", None) != module.__name__:
                continue
            seen.add(id(candidate))
            collected.append(candidate)
        return collected


__all__ = ["PackageScanner"]
