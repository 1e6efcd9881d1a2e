"""Exceptions for termical library."""


class CalendarError(Exception):
    """Base exception for all termical errors."""


class CalendarParseError(CalendarError):
    """Exception raised when parsing an ics string.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the offending content line or the
    underlying grammar error, useful for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class MalformedLineError(CalendarParseError):
    """A content line could not be split into name, parameters and value.

    Raised when the line has no ':' separator, or when a ';' separated
    parameter segment does not contain exactly one '='.
    """


class UnterminatedBlockError(CalendarParseError):
    """The content ended while a BEGIN block was still open."""


class UnexpectedEndError(CalendarParseError):
    """An END line was found where no block was open."""


class MismatchedBlockError(CalendarParseError):
    """An END line named a different block than the one open (strict mode)."""


class FetchError(CalendarError):
    """Exception raised when calendar content could not be downloaded."""


class ConfigError(CalendarError):
    """Exception raised when the configuration file is missing or invalid."""
