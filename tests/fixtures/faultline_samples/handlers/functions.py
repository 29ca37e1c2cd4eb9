from faultline import HandlingResult, exception_handler
from faultline_samples.handlers.domain import NotFoundHandler  # noqa: F401


@exception_handler()
def key_error_handler(exception: KeyError) -> HandlingResult:
    return HandlingResult.with_payload(404, exception.args[0])


def helper(exception: KeyError) -> HandlingResult:
    return HandlingResult.just_status(200)
