"""
Parse an arXiv stamp out of citation text.

A stamp is the line arXiv prints down the margin of a PDF, and the form in
which papers are usually cited:

    arXiv:0706.0001v1  [q-bio.CB]  1 Jun 2007

The parser walks left to right: identifier, bracketed category, date.  Each
step starts where the previous one ended; a failure at any step is final.
"""

from __future__ import annotations

import logging
import re

from .categories import is_valid_category
from .dates import resolve_date
from .exceptions import (
    IdentifierError,
    InvalidDateError,
    MissingCategoryError,
    MissingIdentifierError,
    UnknownCategoryError,
)
from .identifier import IDENTIFIER_SEARCH, parse_identifier
from .models import ArxivStamp

logger = logging.getLogger(__name__)


# Line breaks end a stamp; every other Unicode whitespace (NBSP, thin space,
# \f, \v) separates components on the same line.
LINE_BREAK = re.compile(r"\r\n|[\r\n\x85\u2028\u2029]")
_GAP = r"[^\S\r\n\x85\u2028\u2029]"

_CATEGORY = re.compile(rf"{_GAP}*\[(?P<category>[^\]\r\n\x85\u2028\u2029]*)\]")
_DATE = re.compile(
    rf"{_GAP}*(?P<day>[0-9]+){_GAP}+(?P<month>[A-Za-z]+\.?){_GAP}+(?P<year>[0-9]+){_GAP}*"
)


def parse_stamp(text: str) -> ArxivStamp:
    """Find and parse the first stamp in *text*.

    Args:
        text: Free text containing e.g. ``"arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007"``.

    Returns:
        ArxivStamp with the identifier, category and submission date.

    Raises:
        MissingIdentifierError: No identifier-shaped token, or it failed to parse.
        MissingCategoryError: No ``[category]`` right after the identifier.
        UnknownCategoryError: The bracketed token is not an arXiv category.
        InvalidDateError: The rest of the line is not ``D Month YYYY``.
        DateError: The date has the right shape but an impossible component.
    """
    # ── Step 1: Identifier ──────────────────────────────────────────
    id_match = IDENTIFIER_SEARCH.search(text)
    if id_match is None:
        raise MissingIdentifierError(
            "No arXiv identifier found in stamp text.", details={"text": text}
        )
    try:
        identifier = parse_identifier(id_match.group(0))
    except IdentifierError as err:
        raise MissingIdentifierError(
            f"Identifier {id_match.group(0)!r} is malformed: {err}",
            details={"candidate": id_match.group(0), "cause": err.code},
            cause=err,
        ) from err

    # ── Step 2: Bracketed category ──────────────────────────────────
    cat_match = _CATEGORY.match(text, id_match.end())
    if cat_match is None:
        raise MissingCategoryError(
            f"Expected '[category]' after identifier {id_match.group(0)!r}.",
            details={"identifier": str(identifier)},
        )
    category = cat_match.group("category")
    if not is_valid_category(category):
        raise UnknownCategoryError(
            f"{category!r} is not an arXiv category.",
            details={"category": category},
        )

    # ── Step 3: Date on the rest of the line ────────────────────────
    date_text = LINE_BREAK.split(text[cat_match.end():], maxsplit=1)[0]
    date_match = _DATE.fullmatch(date_text)
    if date_match is None:
        raise InvalidDateError(
            f"Expected a date like '1 Jun 2007' after [{category}], got {date_text!r}.",
            details={"date": date_text},
        )
    submitted = resolve_date(
        date_match.group("day"), date_match.group("month"), date_match.group("year")
    )

    stamp = ArxivStamp(identifier=identifier, category=category, submitted=submitted)
    logger.debug("Parsed stamp %s", stamp)
    return stamp
