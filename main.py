#!/usr/bin/env python3
"""
arXiv Stamp — Entry Point
=========================

Scans citation text for arXiv stamps and prints what was accepted or rejected.

Usage:
    python main.py                    # Scan the built-in sample references
    python main.py refs.txt more.txt  # Scan the lines of the given files
    ARXIV_STAMP_LOG_LEVEL=DEBUG python main.py
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from arxiv_stamp.models import ScanReport
from arxiv_stamp.pipeline import StampScanPipeline

load_dotenv()


# ─── Sample Reference List — Some Lines Broken on Purpose ───────────

SAMPLE_REFERENCES = """\
arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007
[12] see arXiv:1501.00001v3  [cs.LG]  14 Jan 2015
arXiv:hep-th/9901001v2 [hep-th] 4 Jan 1999
arXiv:9912.12345v2 [bogus.cat] 1 Jun 2007
arXiv:9913.12345 [math.AG] 1 Dec 2099
arXiv:0706.0001v1 [q-bio.CB] 30 Feb 2007
Smith et al., Phys. Rev. Lett. 99, 2007"""


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(report: ScanReport) -> int:
    """Pretty-print the scan report with ANSI color codes.

    Returns:
        0 if every line held a valid stamp, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  ARXIV STAMP SCAN{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Audit Hash:  {_DIM}{report.original_hash[:16]}...{_RESET}")
    print(f"  Lines:       {len(report.entries)}")
    print(f"{'─' * _WIDTH}")

    for entry in report.entries:
        if entry.stamp is not None:
            stamp = entry.stamp
            print(f"  {_GREEN}OK{_RESET}   line {entry.line_number}: {_BOLD}{stamp}{_RESET}")
            print(f"       {_DIM}{stamp.group.value} / submitted {stamp.submitted}{_RESET}")
        elif entry.finding is not None:
            print(f"  {_RED}FAIL{_RESET} line {entry.line_number}: {entry.text.strip()}")
            print(f"       {_RED}[{entry.finding.code}]{_RESET} {entry.finding.message}")

    print(f"{'=' * _WIDTH}")
    if report.is_clean:
        print(f"  {_GREEN}{_BOLD}ALL {report.accepted} STAMP(S) VALID{_RESET}")
    else:
        print(
            f"  {_RED}{_BOLD}{report.rejected} LINE(S) REJECTED  --  "
            f"{report.accepted} accepted{_RESET}"
        )
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.is_clean else 1


# ─── Main ────────────────────────────────────────────────────────────


def _log_level() -> int:
    """Level from ARXIV_STAMP_LOG_LEVEL; unknown names fall back to WARNING."""
    level = logging.getLevelName(os.getenv("ARXIV_STAMP_LOG_LEVEL", "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """Scan the sample text, or the files named on the command line."""
    logging.basicConfig(
        level=_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    paths = sys.argv[1:] if argv is None else argv
    if paths:
        text = "\n".join(Path(p).read_text(encoding="utf-8") for p in paths)
    else:
        text = SAMPLE_REFERENCES

    report = StampScanPipeline().run(text)
    return print_report(report)


if __name__ == "__main__":
    sys.exit(main())
