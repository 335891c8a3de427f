"""
Resolve day / month / year tokens into a calendar date.

Supported month spellings (case-insensitive, optional trailing period):
    "6", "06"              → June
    "Jun", "June", "Jun."  → June
    "Sep", "Sept", "September" → September

The year must already be four digits.  Two-digit years are expanded by the
identifier parser, never here.
"""

from __future__ import annotations

import calendar
from datetime import date

from .exceptions import InvalidDayError, InvalidMonthError, InvalidYearError

# ─── Month Lookup Table ──────────────────────────────────────────────

_MONTHS: dict[str, int] = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "sept": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


# ─── Public API ──────────────────────────────────────────────────────


def resolve_month(token: str) -> int:
    """Turn a numeric or named month token into 1-12.

    Raises:
        InvalidMonthError: If the token is out of range or not a month name.
    """
    cleaned = token.strip()
    if _is_digits(cleaned):
        month = int(cleaned)
        if 1 <= month <= 12:
            return month
        raise InvalidMonthError(
            f"Month {cleaned!r} is outside 1-12.", details={"month": token}
        )

    month = _MONTHS.get(cleaned.rstrip(".").lower())
    if month is None:
        raise InvalidMonthError(
            f"Unrecognized month name {token!r}.", details={"month": token}
        )
    return month


def resolve_date(day_token: str, month_token: str, year_token: str) -> date:
    """Build a date from raw tokens, e.g. ``("1", "Jun", "2007")``.

    Raises:
        InvalidYearError: If the year is not exactly four digits.
        InvalidMonthError: If the month cannot be resolved.
        InvalidDayError: If the day does not exist in that month and year.
    """
    year_str = year_token.strip()
    if len(year_str) != 4 or not _is_digits(year_str) or year_str == "0000":
        raise InvalidYearError(
            f"Year {year_token!r} must be exactly four digits.",
            details={"year": year_token},
        )
    year = int(year_str)

    month = resolve_month(month_token)

    day_str = day_token.strip()
    if not _is_digits(day_str):
        raise InvalidDayError(
            f"Day {day_token!r} is not a number.", details={"day": day_token}
        )
    day = int(day_str)

    # monthrange applies the Gregorian leap-year rule
    days_in_month = calendar.monthrange(year, month)[1]
    if not 1 <= day <= days_in_month:
        raise InvalidDayError(
            f"Day {day} does not exist in {_ABBREVIATIONS[month - 1]} {year} "
            f"(valid range: 1-{days_in_month}).",
            details={"day": day, "month": month, "year": year},
        )

    return date(year, month, day)


def _is_digits(token: str) -> bool:
    return token.isascii() and token.isdecimal()


def month_abbreviation(month: int) -> str:
    """Three-letter English abbreviation used when rendering stamps."""
    return _ABBREVIATIONS[month - 1]
