"""
arXiv stamp — recognise and validate arXiv identifiers and citation stamps.

Architecture: Identifier parser + Category table + Date resolver → Stamp parser
Scope:        Pure text processing. No network, no catalog beyond the taxonomy.
"""

__version__ = "1.0.0"

from .categories import is_valid_category
from .dates import resolve_date
from .exceptions import (
    ArxivParseError,
    DateError,
    IdentifierError,
    InvalidDateError,
    InvalidDayError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidVersionError,
    InvalidYearError,
    MissingCategoryError,
    MissingIdentifierError,
    UnknownCategoryError,
)
from .identifier import detect_scheme, parse_identifier
from .models import ArxivIdentifier, ArxivStamp, IdentifierScheme
from .stamp import parse_stamp

__all__ = [
    "ArxivIdentifier",
    "ArxivParseError",
    "ArxivStamp",
    "DateError",
    "IdentifierError",
    "IdentifierScheme",
    "InvalidDateError",
    "InvalidDayError",
    "InvalidFormatError",
    "InvalidMonthError",
    "InvalidVersionError",
    "InvalidYearError",
    "MissingCategoryError",
    "MissingIdentifierError",
    "UnknownCategoryError",
    "detect_scheme",
    "is_valid_category",
    "parse_identifier",
    "parse_stamp",
    "resolve_date",
]
