"""
Exception hierarchy for the book extractor.

Every stage of the pipeline raises a subclass of BookExtractorError so
callers can tell which stage failed without inspecting messages.
"""
from typing import Optional


class BookExtractorError(Exception):
    """Base exception for all book extractor errors"""

    pass


class ConfigError(BookExtractorError):
    """
    Configuration error.

    Raised when the API URL cannot be resolved from the environment
    or the settings file.
    """

    pass


class FetchError(BookExtractorError):
    """
    HTTP fetch error.

    Raised when the request could not be sent or the API answered
    with a non-success status. Transport failures carry no status code.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ParseError(BookExtractorError):
    """
    Response parsing error.

    Raised when the response body is not JSON or does not have the
    expected {"books": [...]} shape.
    """

    pass


class ReportError(BookExtractorError, IOError):
    """
    Report writing error.

    Raised when the report file cannot be opened or written.
    """

    pass
