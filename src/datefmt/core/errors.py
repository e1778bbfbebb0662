class DatefmtError(Exception):
    """Base error."""

class InvalidFormatError(DatefmtError, TypeError):
    """Raised when the `format` argument is not a string."""

    def __init__(self, message: str = "Argument `format` must be a string") -> None:
        super().__init__(message)

class InvalidDateError(DatefmtError, TypeError):
    """Raised when the `date` argument cannot be coerced to an instant."""

    def __init__(
        self,
        message: str = "Argument `date` must be instance of Date or Unix Timestamp or ISODate String",
    ) -> None:
        super().__init__(message)
