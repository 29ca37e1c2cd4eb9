"""Tests for :class:`ErrorHandlerFactory`."""

import logging
import threading

import pytest

from faultline import FaultlineSettings, HandlingResult
from faultline.discovery import (
    ErrorHandlerFactory,
    HandlerInstantiationError,
    InstanceProvider,
    PackageScanner,
    create_error_handler_from_settings,
)
from faultline_samples.errors import ConflictError, UserNotFoundError
from faultline_samples.injected import LookupErrorHandler, Repository


class CountingScanner(PackageScanner):
    def __init__(self):
        self.scanned = []

    def scan(self, package_name):
        self.scanned.append(package_name)
        return super().scan(package_name)


class BrokenProvider:
    def get(self, handler_class):
        raise ConnectionError("container unavailable")


def test_creates_error_handler_from_package():
    error_handler = ErrorHandlerFactory().create_error_handler("faultline_samples.handlers")

    assert error_handler.handle(UserNotFoundError("bob")) == HandlingResult.with_payload(
        404, {"missing": "bob"}
    )
    assert error_handler.handle(ConflictError()) == HandlingResult.with_payload(400, "domain")
    assert error_handler.handle(KeyError("id")) == HandlingResult.with_payload(404, "id")
    assert error_handler.handle(OSError()) == HandlingResult.just_status(500)


def test_packages_are_scanned_once_and_cached(caplog):
    scanner = CountingScanner()
    factory = ErrorHandlerFactory(scanner=scanner)

    with caplog.at_level(logging.INFO, logger="faultline"):
        first = factory.create_error_handler("faultline_samples.handlers")
        second = factory.create_error_handler("faultline_samples.handlers")

    assert scanner.scanned == ["faultline_samples.handlers"]
    assert first.registry.entries() == second.registry.entries()
    assert factory.cached_packages == ("faultline_samples.handlers",)
    assert "Found 3 exception handler(s) in package faultline_samples.handlers" in caplog.text


def test_cached_handlers_accumulate_across_calls():
    factory = ErrorHandlerFactory()
    factory.create_error_handler("faultline_samples.handlers")

    error_handler = factory.create_error_handler("faultline_samples.rooted")

    assert not error_handler.registry.default_used
    assert error_handler.handle(KeyError("id")).status_code == 404
    assert error_handler.handle(OSError()) == HandlingResult.with_payload(503, "catch all")


def test_reset_cache_for_selected_packages():
    scanner = CountingScanner()
    factory = ErrorHandlerFactory(scanner=scanner)
    factory.create_error_handler("faultline_samples.handlers", "faultline_samples.rooted")

    factory.reset_cache("faultline_samples.rooted")
    assert factory.cached_packages == ("faultline_samples.handlers",)

    factory.reset_cache()
    assert factory.cached_packages == ()

    factory.create_error_handler("faultline_samples.rooted")
    assert scanner.scanned.count("faultline_samples.rooted") == 2


def test_duplicates_across_modules_keep_scan_order():
    error_handler = ErrorHandlerFactory().create_error_handler("faultline_samples.duplicates")

    assert error_handler.handle(ValueError()).payload == "first"
    assert len(error_handler.registry.discarded) == 1


def test_provider_instance_is_preferred():
    repository = Repository("accounts")
    provider = InstanceProvider([LookupErrorHandler(repository)])

    error_handler = ErrorHandlerFactory(provider=provider).create_error_handler(
        "faultline_samples.injected"
    )

    assert error_handler.handle(IndexError()) == HandlingResult.with_payload(404, "accounts")


def test_missing_constructor_arguments_raise():
    with pytest.raises(HandlerInstantiationError, match="without arguments"):
        ErrorHandlerFactory().create_error_handler("faultline_samples.injected")


def test_ambiguous_provider_falls_back_to_constructor():
    provider = InstanceProvider(
        [LookupErrorHandler(Repository("a")), LookupErrorHandler(Repository("b"))]
    )

    with pytest.raises(HandlerInstantiationError, match="without arguments"):
        ErrorHandlerFactory(provider=provider).create_error_handler("faultline_samples.injected")


def test_unexpected_provider_failure_is_wrapped():
    factory = ErrorHandlerFactory(provider=BrokenProvider())

    with pytest.raises(HandlerInstantiationError) as info:
        factory.create_error_handler("faultline_samples.handlers")

    assert isinstance(info.value.__cause__, ConnectionError)


def test_abstract_handler_raises():
    with pytest.raises(HandlerInstantiationError, match="abstract"):
        ErrorHandlerFactory().create_error_handler("faultline_samples.abstract")


def test_constructor_failure_is_chained():
    with pytest.raises(HandlerInstantiationError, match="cannot build") as info:
        ErrorHandlerFactory().create_error_handler("faultline_samples.exploding_constructor")

    assert isinstance(info.value.__cause__, RuntimeError)


def test_failed_package_is_not_cached():
    factory = ErrorHandlerFactory()

    with pytest.raises(HandlerInstantiationError):
        factory.create_error_handler("faultline_samples.abstract")

    assert factory.cached_packages == ()


def test_concurrent_creation_scans_once():
    scanner = CountingScanner()
    factory = ErrorHandlerFactory(scanner=scanner)

    threads = [
        threading.Thread(target=factory.create_error_handler, args=("faultline_samples.handlers",))
        for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert scanner.scanned == ["faultline_samples.handlers"]


def test_create_from_settings():
    settings = FaultlineSettings(base_packages=["faultline_samples.handlers"], default_status_code=503)

    error_handler = create_error_handler_from_settings(settings)

    assert error_handler.handle(OSError()) == HandlingResult.just_status(503)
    assert error_handler.handle(ConflictError()).status_code == 400
