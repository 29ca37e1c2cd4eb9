"""Tests for :class:`PackageScanner`."""

import pytest

from faultline.discovery import HandlerDiscoveryError, PackageScanner


def names(found):
    return [candidate.__qualname__ for candidate in found]


def test_scan_finds_marked_handlers_in_order():
    found = PackageScanner().scan("faultline_samples.handlers")

    assert names(found) == ["NotFoundHandler", "DomainErrorHandler", "key_error_handler"]


def test_scan_ignores_unmarked_and_imported_objects():
    found = names(PackageScanner().scan("faultline_samples.handlers"))

    assert "UnmarkedHandler" not in found
    assert "helper" not in found
    assert found.count("NotFoundHandler") == 1


def test_scan_plain_module():
    assert names(PackageScanner().scan("faultline_samples.rooted")) == ["CatchAllHandler"]


def test_missing_package_raises_discovery_error():
    with pytest.raises(HandlerDiscoveryError, match="faultline_samples.missing"):
        PackageScanner().scan("faultline_samples.missing")


def test_failing_submodule_raises_discovery_error():
    with pytest.raises(HandlerDiscoveryError, match="faultline_samples.broken.explodes") as info:
        PackageScanner().scan("faultline_samples.broken")

    assert isinstance(info.value.__cause__, RuntimeError)
