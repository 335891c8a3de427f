"""
Batch scanning — run the stamp parser over every line of a text block.

Flow:
  ┌────────────┐
  │ Raw text   │
  └─────┬──────┘
        │  split into lines, skip blanks
  ┌─────▼──────┐
  │ parse_stamp│   ← one attempt per line, first match only
  └─────┬──────┘
        │
  ┌─────▼──────┐
  │ ScanReport │   ← stamps + typed findings + audit hash
  └────────────┘

A rejected line becomes a finding and scanning moves on to the next line.
The parsers themselves never skip or retry; that decision lives here.
"""

from __future__ import annotations

import hashlib
import logging

from .exceptions import ArxivParseError
from .models import ParseFinding, ScanEntry, ScanReport
from .stamp import LINE_BREAK, parse_stamp

logger = logging.getLogger(__name__)


class StampScanPipeline:
    """Scans citation text line by line.

    Usage:
        report = StampScanPipeline().run(text)
        for stamp in report.stamps:
            print(stamp.identifier, stamp.category)
    """

    def run(self, raw_text: str) -> ScanReport:
        """Parse every non-blank line of *raw_text* as a stamp.

        Returns:
            ScanReport with one entry per non-blank line.
        """
        doc_hash = hashlib.sha256(raw_text.encode("utf-8")).hexdigest()

        entries: list[ScanEntry] = []
        for line_number, line in enumerate(LINE_BREAK.split(raw_text), start=1):
            if not line.strip():
                continue
            entries.append(self._scan_line(line_number, line))

        report = ScanReport(entries=entries, original_hash=doc_hash)
        logger.info(
            "Scanned %d line(s): %d accepted, %d rejected",
            len(entries),
            report.accepted,
            report.rejected,
        )
        return report

    def _scan_line(self, line_number: int, line: str) -> ScanEntry:
        try:
            stamp = parse_stamp(line)
        except ArxivParseError as err:
            logger.debug("Line %d rejected [%s]: %s", line_number, err.code, err)
            return ScanEntry(
                line_number=line_number,
                text=line,
                finding=finding_from_error(err),
            )
        return ScanEntry(line_number=line_number, text=line, stamp=stamp)


def finding_from_error(err: ArxivParseError) -> ParseFinding:
    """Turn a parse exception into a serialisable finding."""
    return ParseFinding(code=err.code, message=str(err), details=err.details)
