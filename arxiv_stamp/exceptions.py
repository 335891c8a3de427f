"""
Custom exception hierarchy for arXiv identifier and stamp parsing.

Each exception type maps to one kind of parse failure, so callers can
catch exactly what they care about and report it with a stable code.
"""

from __future__ import annotations


class ArxivParseError(Exception):
    """Base exception for all identifier and stamp parse failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class IdentifierError(ArxivParseError):
    """Raised by the identifier parser."""


class DateError(ArxivParseError):
    """Raised by the date resolver."""


class InvalidFormatError(IdentifierError):
    """The text matches neither the old nor the new identifier shape."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_FORMAT", message, details)


class InvalidMonthError(IdentifierError, DateError):
    """A month is outside 1-12 or is not a recognised month name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_MONTH", message, details)


class InvalidVersionError(IdentifierError):
    """A `vN` suffix is present but N is not a positive integer."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_VERSION", message, details)


class InvalidDayError(DateError):
    """The day does not exist in the resolved month and year."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_DAY", message, details)


class InvalidYearError(DateError):
    """The year token is not a four-digit number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_YEAR", message, details)


class UnknownCategoryError(IdentifierError):
    """A subject category is not part of the arXiv taxonomy."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_CATEGORY", message, details)


class MissingIdentifierError(ArxivParseError):
    """Stamp text holds no identifier, or the one it holds is malformed."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        cause: IdentifierError | None = None,
    ):
        self.cause = cause
        super().__init__("MISSING_IDENTIFIER", message, details)


class MissingCategoryError(ArxivParseError):
    """Stamp text has no `[category]` right after the identifier."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MISSING_CATEGORY", message, details)


class InvalidDateError(ArxivParseError):
    """Stamp text after the category is not a `D Month YYYY` expression."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_DATE", message, details)
