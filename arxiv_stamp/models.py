"""
Pydantic models for parsed arXiv records.

Records are frozen: they are only ever built by a successful parse and
never mutated afterwards.  Field constraints and validators repeat the
parser's checks, so a record built by hand renders text that parses back
to an equal record.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .categories import ArchiveGroup, archive_group, is_valid_category, split_category
from .dates import month_abbreviation


# ─── Identifier Scheme ───────────────────────────────────────────────


class IdentifierScheme(str, Enum):
    """Which historical arXiv grammar an identifier follows."""

    OLD = "old"  # archive/YYMMNNN, up to March 2007
    NEW = "new"  # YYMM.NNNNN, since 1 April 2007


# ─── Identifier ──────────────────────────────────────────────────────


class ArxivIdentifier(BaseModel):
    """One arXiv identifier, e.g. ``arXiv:0706.0001v1`` or ``hep-th/9901001``."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=2000, le=2099)
    month: int = Field(ge=1, le=12)
    number: str = Field(pattern=r"^[0-9]+$")  # verbatim, width matters
    version: Optional[int] = Field(default=None, ge=1)
    scheme: IdentifierScheme = IdentifierScheme.NEW
    archive: Optional[str] = None  # old scheme only

    @model_validator(mode="after")
    def _check_scheme_shape(self) -> ArxivIdentifier:
        if self.scheme is IdentifierScheme.OLD:
            if self.archive is None or not is_valid_category(self.archive):
                raise ValueError(
                    f"old-scheme identifiers need a valid archive, got {self.archive!r}"
                )
            if len(self.number) != 3:
                raise ValueError(
                    f"old-scheme number must be 3 digits, got {self.number!r}"
                )
        else:
            if self.archive is not None:
                raise ValueError("new-scheme identifiers carry no archive")
            if len(self.number) not in (4, 5):
                raise ValueError(
                    f"new-scheme number must be 4 or 5 digits, got {self.number!r}"
                )
        return self

    @property
    def is_latest(self) -> bool:
        """True when no version is pinned."""
        return self.version is None

    def with_version(self, version: int) -> ArxivIdentifier:
        # model_copy() skips validation
        return ArxivIdentifier(**{**self.model_dump(), "version": version})

    def as_latest(self) -> ArxivIdentifier:
        return self.model_copy(update={"version": None})

    def __str__(self) -> str:
        prefix = f"{self.year % 100:02d}{self.month:02d}"
        if self.scheme is IdentifierScheme.OLD:
            text = f"arXiv:{self.archive}/{prefix}{self.number}"
        else:
            text = f"arXiv:{prefix}.{self.number}"
        if self.version is not None:
            text += f"v{self.version}"
        return text


# ─── Stamp ───────────────────────────────────────────────────────────


class ArxivStamp(BaseModel):
    """An identifier as printed in citation text, with category and date.

    Example: ``arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007``
    """

    model_config = ConfigDict(frozen=True)

    identifier: ArxivIdentifier
    category: str = Field(min_length=1)
    submitted: date

    @field_validator("category")
    @classmethod
    def _check_category(cls, value: str) -> str:
        if not is_valid_category(value):
            raise ValueError(f"{value!r} is not an arXiv category")
        return value

    @property
    def archive(self) -> str:
        return split_category(self.category)[0]

    @property
    def group(self) -> ArchiveGroup:
        return archive_group(self.archive)

    def __str__(self) -> str:
        submitted = self.submitted
        return (
            f"{self.identifier} [{self.category}] "
            f"{submitted.day} {month_abbreviation(submitted.month)} {submitted.year}"
        )


# ─── Scan Report ─────────────────────────────────────────────────────


class ParseFinding(BaseModel):
    """Why one line of input was rejected."""

    code: str  # Machine-readable, e.g. "UNKNOWN_CATEGORY"
    message: str
    details: dict = Field(default_factory=dict)


class ScanEntry(BaseModel):
    """Outcome for one non-blank input line: a stamp or a finding, never both."""

    line_number: int  # 1-based
    text: str
    stamp: Optional[ArxivStamp] = None
    finding: Optional[ParseFinding] = None

    @property
    def accepted(self) -> bool:
        return self.stamp is not None


class ScanReport(BaseModel):
    """The output of scanning a block of citation text, line by line."""

    entries: list[ScanEntry] = Field(default_factory=list)
    original_hash: str = ""  # SHA-256 of the scanned text

    @property
    def stamps(self) -> list[ArxivStamp]:
        return [e.stamp for e in self.entries if e.stamp is not None]

    @property
    def findings(self) -> list[ParseFinding]:
        return [e.finding for e in self.entries if e.finding is not None]

    @property
    def accepted(self) -> int:
        return len(self.stamps)

    @property
    def rejected(self) -> int:
        return len(self.findings)

    @property
    def is_clean(self) -> bool:
        return self.rejected == 0
