from faultline import ExceptionHandler, HandlingResult, exception_handler


@exception_handler()
class FirstValueErrorHandler(ExceptionHandler[ValueError, str]):
    def handle(self, exception):
        return HandlingResult.with_payload(422, "first")
