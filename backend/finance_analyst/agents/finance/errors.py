UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class FinanceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FinanceError):
    """A required request field is missing or malformed."""

    status_code = 400


class FileProcessingError(FinanceError):
    """The attached file could not be decoded into the transcript."""

    status_code = 400


class InvalidChartDataError(FinanceError):
    """Tool-call arguments failed the chart structure checks."""


class UpstreamError(FinanceError):
    """The chat-completion call itself failed."""
