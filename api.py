"""
arXiv Stamp — FastAPI Server
============================

RESTful API for parsing arXiv identifiers and citation stamps.

Endpoints:
    POST /identifiers/parse     Parse one identifier
    POST /stamps/parse          Parse the first stamp in a text
    POST /stamps/scan           Scan every line of a text for stamps
    POST /stamps/scan/file      Upload a text file to scan
    GET  /categories/{token}    Check a subject category
    GET  /health                Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Configuration (environment or .env):
    ARXIV_STAMP_MAX_UPLOAD_BYTES   Upload size limit (default 1 MiB)
"""

from __future__ import annotations

import asyncio
import os
from datetime import date
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from arxiv_stamp import __version__
from arxiv_stamp.categories import VALID_CATEGORIES, archive_group, is_valid_category, split_category
from arxiv_stamp.exceptions import ArxivParseError
from arxiv_stamp.identifier import parse_identifier
from arxiv_stamp.models import ArxivIdentifier, ArxivStamp, ParseFinding, ScanReport
from arxiv_stamp.pipeline import StampScanPipeline, finding_from_error
from arxiv_stamp.stamp import parse_stamp

load_dotenv()

MAX_UPLOAD_BYTES = int(os.getenv("ARXIV_STAMP_MAX_UPLOAD_BYTES", "1048576"))


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="arXiv Stamp API",
    description=(
        "Recognise and validate arXiv identifiers (old and new scheme) and "
        "citation stamps: identifier, subject category and submission date."
    ),
    version=__version__,
)

_pipeline = StampScanPipeline()


@app.exception_handler(ArxivParseError)
async def parse_error_handler(request: Request, exc: ArxivParseError) -> JSONResponse:
    """Every parse failure becomes a 422 with a machine-readable code."""
    return JSONResponse(
        status_code=422,
        content=finding_from_error(exc).model_dump(mode="json"),
    )


# ─── Request / Response Schemas ─────────────────────────────────────


class ParseRequest(BaseModel):
    """Request body for the parse and scan endpoints."""

    text: str = Field(
        ...,
        description="The text to parse.",
        json_schema_extra={"example": "arXiv:0706.0001v1 [q-bio.CB] 1 Jun 2007"},
    )


class IdentifierOut(ArxivIdentifier):
    """API-facing identifier with its canonical text form."""

    canonical: str


class StampOut(BaseModel):
    identifier: IdentifierOut
    category: str
    submitted: date
    group: str
    canonical: str


class ScanEntryOut(BaseModel):
    line_number: int
    text: str
    stamp: Optional[StampOut] = None
    finding: Optional[ParseFinding] = None


class ScanResponse(BaseModel):
    """Line-by-line scan report returned by the API."""

    is_clean: bool
    accepted: int
    rejected: int
    original_hash: str = Field(description="SHA-256 hash of the scanned text")
    entries: list[ScanEntryOut]


class CategoryResponse(BaseModel):
    category: str
    valid: bool
    archive: Optional[str] = None
    subclass: Optional[str] = None
    group: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    categories_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _identifier_out(identifier: ArxivIdentifier) -> IdentifierOut:
    return IdentifierOut(**identifier.model_dump(), canonical=str(identifier))


def _stamp_out(stamp: ArxivStamp) -> StampOut:
    return StampOut(
        identifier=_identifier_out(stamp.identifier),
        category=stamp.category,
        submitted=stamp.submitted,
        group=stamp.group.value,
        canonical=str(stamp),
    )


def _build_scan_response(report: ScanReport) -> ScanResponse:
    """Convert the internal ScanReport to the API response schema."""
    return ScanResponse(
        is_clean=report.is_clean,
        accepted=report.accepted,
        rejected=report.rejected,
        original_hash=report.original_hash,
        entries=[
            ScanEntryOut(
                line_number=e.line_number,
                text=e.text,
                stamp=_stamp_out(e.stamp) if e.stamp else None,
                finding=e.finding,
            )
            for e in report.entries
        ],
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/identifiers/parse",
    summary="Parse a single arXiv identifier",
    tags=["Parsing"],
    responses={422: {"description": "Not a valid arXiv identifier"}},
)
def parse_identifier_endpoint(request: ParseRequest) -> IdentifierOut:
    """Parse e.g. `arXiv:0706.0001v1` or `hep-th/9901001`.

    Only surrounding whitespace and a leading `arXiv:` are tolerated.
    """
    return _identifier_out(parse_identifier(request.text))


@app.post(
    "/stamps/parse",
    summary="Parse the first arXiv stamp in a text",
    tags=["Parsing"],
    responses={422: {"description": "No valid stamp in the text"}},
)
def parse_stamp_endpoint(request: ParseRequest) -> StampOut:
    """Find `identifier [category] D Mon YYYY` in the text and validate it."""
    return _stamp_out(parse_stamp(request.text))


@app.post(
    "/stamps/scan",
    summary="Scan every line of a text for stamps",
    tags=["Scanning"],
)
def scan_stamps(request: ParseRequest) -> ScanResponse:
    """Parse each non-blank line; rejected lines come back as findings."""
    return _build_scan_response(_pipeline.run(request.text))


@app.post(
    "/stamps/scan/file",
    summary="Scan an uploaded text file for stamps",
    tags=["Scanning"],
    responses={
        413: {"description": "File too large"},
        400: {"description": "File is not valid UTF-8 text"},
    },
)
async def scan_stamps_file(file: UploadFile) -> ScanResponse:
    """Upload a `.txt` file (e.g. a reference list) to scan line by line."""
    if file.size and file.size > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File too large (max {MAX_UPLOAD_BYTES} bytes)")

    content = await file.read()
    try:
        raw_text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")

    report = await asyncio.to_thread(_pipeline.run, raw_text)
    return _build_scan_response(report)


@app.get(
    "/categories/{token:path}",
    summary="Check an arXiv subject category",
    tags=["Categories"],
)
def check_category(token: str) -> CategoryResponse:
    """Exact, case-sensitive lookup, e.g. `q-bio.CB` or `hep-th`."""
    if not is_valid_category(token):
        return CategoryResponse(category=token, valid=False)
    archive, subclass = split_category(token)
    return CategoryResponse(
        category=token,
        valid=True,
        archive=archive,
        subclass=subclass,
        group=archive_group(archive).value,
    )


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        categories_loaded=len(VALID_CATEGORIES),
    )
