"""Domain-specific exceptions with user-ready messages for query parameter resolution."""

DEFAULT_MISSING_PARAMETER_MESSAGE = "Missing required query parameter"


class QueryParameterException(Exception):
    """Base exception class for query parameter errors.

    All query parameter exceptions include user-ready messages that can be
    returned directly to the client without further message construction.
    """

    def __init__(self, message: str, error_code: str) -> None:
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class MissingParameterException(QueryParameterException):
    """Exception raised when a required query parameter has no usable value."""

    def __init__(self, message: str | None = None, parameter: str | None = None) -> None:
        self.parameter = parameter
        super().__init__(
            message if message is not None else DEFAULT_MISSING_PARAMETER_MESSAGE,
            error_code="MISSING_PARAMETER",
        )
