"""
Number Phrases — FastAPI Server
===============================

HTTP surface over the number-phrase parser.

Endpoints:
    POST /parse             Parse one number phrase (full or prefix mode)
    POST /extract           Find every number phrase in a text
    POST /extract/file      Upload a text file and extract from it
    GET  /health            Health check for load balancers

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import asyncio
import logging
import os
from enum import Enum

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, UploadFile
from pydantic import BaseModel, Field

import number_phrases
from number_phrases.exceptions import NumberParseError
from number_phrases.models import Match, ParsedValue

load_dotenv()

logger = logging.getLogger(__name__)

# ─── Configuration ───────────────────────────────────────────────────

MAX_TEXT_LENGTH = int(os.environ.get("NUMBER_PHRASES_MAX_TEXT_LENGTH", "100000"))
MAX_UPLOAD_BYTES = 1_048_576


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Phrases API",
    description=(
        "Exact integers from English number words. "
        "Parses phrases such as 'four score and seven' or "
        "'nineteen hundred and ninety nine', and finds them in free text."
    ),
    version=number_phrases.__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ParseMode(str, Enum):
    FULL = "full"  # The whole text must be one number
    PREFIX = "prefix"  # The longest number at the start of the text


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="The number phrase to parse.",
        json_schema_extra={"example": "nineteen hundred and ninety nine"},
    )
    mode: ParseMode = ParseMode.FULL


class ExtractRequest(BaseModel):
    """Request body for the /extract endpoint."""

    text: str = Field(
        ...,
        max_length=MAX_TEXT_LENGTH,
        description="Free text to scan for number phrases.",
        json_schema_extra={"example": "I have four cats and a dozen eggs"},
    )


class ExtractResponse(BaseModel):
    """Every number phrase found, in order of occurrence."""

    count: int
    matches: list[Match]

    model_config = {"json_schema_extra": {"example": {
        "count": 2,
        "matches": [
            {"value": 4, "start": 7, "end": 11, "text": "four",
             "line": 1, "column": 8, "end_line": 1, "end_column": 12},
            {"value": 12, "start": 21, "end": 28, "text": "a dozen",
             "line": 1, "column": 22, "end_line": 1, "end_column": 29},
        ],
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str
    max_value: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _unprocessable(exc: NumberParseError) -> HTTPException:
    """Grammar failures are client errors: the text is not a number."""
    return HTTPException(
        status_code=422,
        detail={
            "code": exc.code,
            "message": str(exc),
            "position": exc.position,
            "expected": exc.details.get("expected", []),
        },
    )


def _extract_all(text: str) -> ExtractResponse:
    matches = list(number_phrases.extract(text))
    return ExtractResponse(count=len(matches), matches=matches)


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Parse one English number phrase",
    tags=["Parsing"],
    responses={422: {"description": "Text is not a valid number phrase"}},
)
def parse_phrase(request: ParseRequest) -> ParsedValue:
    """Convert a number phrase to an integer.

    - **full** mode: the whole text must be a single number phrase.
    - **prefix** mode: the longest number phrase at the start of the text;
      `end` tells where it stops.
    """
    logger.info("POST /parse mode=%s length=%d", request.mode.value, len(request.text))
    try:
        if request.mode is ParseMode.FULL:
            # Raises unless the whole text is one number; the span comes from
            # the prefix parse, which reads the same phrase.
            number_phrases.parse(request.text)
        return number_phrases.try_parse_prefix(request.text)
    except NumberParseError as exc:
        raise _unprocessable(exc)


@app.post(
    "/extract",
    summary="Find every number phrase in a text",
    tags=["Extraction"],
)
def extract_phrases(request: ExtractRequest) -> ExtractResponse:
    """Scan free text and return each number phrase with its value and offsets."""
    logger.info("POST /extract length=%d", len(request.text))
    return _extract_all(request.text)


@app.post(
    "/extract/file",
    summary="Find every number phrase in an uploaded text file",
    tags=["Extraction"],
    responses={
        413: {"description": "File too large (max 1 MB)"},
        400: {"description": "File is not valid UTF-8 text"},
    },
)
async def extract_phrases_file(file: UploadFile) -> ExtractResponse:
    """Upload a `.txt` file and extract every number phrase from it.

    Accepts any text file up to 1 MB.
    """
    if file.size and file.size > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 1 MB)")

    content = await file.read()
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large (max 1 MB)")
    try:
        raw_text = content.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 encoded text")

    logger.info("POST /extract/file name=%s length=%d", file.filename, len(raw_text))
    return await asyncio.to_thread(_extract_all, raw_text)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=number_phrases.__version__,
        max_value=number_phrases.MAX_VALUE,
    )
