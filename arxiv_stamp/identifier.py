"""
Deterministic parsing of a single arXiv identifier.

Two grammars are recognised, by shape alone:

    new scheme (since April 2007):  YYMM.NNNN or YYMM.NNNNN   e.g. 0706.0001v1
    old scheme (up to March 2007):  archive/YYMMNNN           e.g. hep-th/9901001

Either may carry a leading ``arXiv:`` marker and a ``vN`` version suffix.
Two-digit years always expand to ``2000 + YY``, whatever their magnitude.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from .categories import is_valid_category
from .exceptions import (
    InvalidFormatError,
    InvalidMonthError,
    InvalidVersionError,
    UnknownCategoryError,
)
from .models import ArxivIdentifier, IdentifierScheme

logger = logging.getLogger(__name__)


# ─── Patterns ────────────────────────────────────────────────────────

_MARKER = r"(?i:arxiv:)"
_ARCHIVE = r"[a-z]+(?:-[a-z]+)*(?:\.[A-Za-z]+(?:-[a-z]+)*)?"
# Anything after "v" up to whitespace or a bracket; checked after matching
_VERSION = r"(?:v(?P<version>[^\s\[\]]*))?"

# Unicode mode so \s includes no-break and thin spaces; digits are spelled [0-9]
_NEW_SCHEME = re.compile(
    rf"(?P<yy>[0-9]{{2}})(?P<mm>[0-9]{{2}})\.(?P<number>[0-9]{{4,5}}){_VERSION}"
)
_OLD_SCHEME = re.compile(
    rf"(?P<archive>{_ARCHIVE})/(?P<yy>[0-9]{{2}})(?P<mm>[0-9]{{2}})(?P<number>[0-9]{{3}}){_VERSION}"
)
_LEADING_MARKER = re.compile(rf"^{_MARKER}")

# Used by the stamp parser to find the first identifier-shaped token in prose
IDENTIFIER_SEARCH = re.compile(
    rf"(?<![\w./-]){_MARKER}?"
    rf"(?:[0-9]{{4}}\.[0-9]{{4,5}}|{_ARCHIVE}/[0-9]{{7}})(?![0-9])"
    rf"(?:v[^\s\[\]]*)?"
)


# ─── Public API ──────────────────────────────────────────────────────


def detect_scheme(text: str) -> Optional[IdentifierScheme]:
    """Classify *text* by shape only; no component is range-checked."""
    candidate = _strip_marker(text)
    if _NEW_SCHEME.fullmatch(candidate):
        return IdentifierScheme.NEW
    if _OLD_SCHEME.fullmatch(candidate):
        return IdentifierScheme.OLD
    return None


def parse_identifier(text: str) -> ArxivIdentifier:
    """Parse exactly one identifier, e.g. ``"arXiv:0706.0001v1"``.

    Only surrounding whitespace and a leading ``arXiv:`` marker are
    tolerated; use :func:`arxiv_stamp.stamp.parse_stamp` for identifiers
    embedded in longer text.

    Raises:
        InvalidFormatError: Neither scheme's shape matches.
        UnknownCategoryError: An old-scheme archive prefix is not a category.
        InvalidMonthError: ``MM`` is outside 1-12.
        InvalidVersionError: A ``v`` suffix is not a positive integer.
    """
    candidate = _strip_marker(text)

    scheme = IdentifierScheme.NEW
    match = _NEW_SCHEME.fullmatch(candidate)
    if match is None:
        scheme = IdentifierScheme.OLD
        match = _OLD_SCHEME.fullmatch(candidate)
    if match is None:
        raise InvalidFormatError(
            f"{text!r} is not an arXiv identifier; expected YYMM.NNNNN[vN] "
            f"or archive/YYMMNNN[vN].",
            details={"text": text},
        )

    archive: str | None = None
    if scheme is IdentifierScheme.OLD:
        archive = match.group("archive")
        if not is_valid_category(archive):
            raise UnknownCategoryError(
                f"Archive {archive!r} in {text!r} is not an arXiv category.",
                details={"category": archive, "text": text},
            )

    month = int(match.group("mm"))
    if not 1 <= month <= 12:
        raise InvalidMonthError(
            f"Month {match.group('mm')!r} in {text!r} is outside 1-12.",
            details={"month": match.group("mm"), "text": text},
        )

    identifier = ArxivIdentifier(
        year=2000 + int(match.group("yy")),
        month=month,
        number=match.group("number"),
        version=_parse_version(match.group("version"), text),
        scheme=scheme,
        archive=archive,
    )
    logger.debug("Parsed %s-scheme identifier %s", scheme.value, identifier)
    return identifier


# ─── Internal Helpers ────────────────────────────────────────────────


def _strip_marker(text: str) -> str:
    return _LEADING_MARKER.sub("", text.strip(), count=1)


def _parse_version(raw: str | None, text: str) -> int | None:
    """``None`` when there is no suffix; otherwise a positive int or an error."""
    if raw is None:
        return None
    if not (raw.isascii() and raw.isdecimal()) or int(raw) < 1:
        raise InvalidVersionError(
            f"Version suffix 'v{raw}' in {text!r} is not a positive integer.",
            details={"version": raw, "text": text},
        )
    return int(raw)
