"""
Discovery objection / answer generation endpoints.

POST /process-document  — objections (plus answers when a fact pattern is given).
POST /generate-answers  — objections and substantive answers in one block.
POST /generate-docx     — render generated text as a downloadable .docx.
"""
from __future__ import annotations

import logging
import re
from pathlib import PurePosixPath
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile

from app.config import settings
from app.dependencies.llm import get_completion_client
from app.exceptions import (
    FileTooLarge,
    GenerationFailed,
    InvalidRequest,
    MissingField,
    NoExtractableText,
)
from app.models.schemas import (
    AnswersResponse,
    ErrorResponse,
    GenerateDocxRequest,
    ObjectionsResponse,
)
from app.services.document_parser import DocumentParser
from app.services.docx_formatter import DOCX_MEDIA_TYPE, render_docx
from app.services.llm_client import CompletionClient
from app.services.prompts import (
    ANSWERS_SYSTEM_PROMPT,
    COMBINED_SYSTEM_PROMPT,
    OBJECTIONS_SYSTEM_PROMPT,
    build_answers_prompt,
    build_combined_prompt,
    build_objections_prompt,
)
from app.services.response_splitter import SplitResponse, split_sections

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    413: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._ -]")


# ---------------------------------------------------------------------------
# Objections (and optional answers)
# ---------------------------------------------------------------------------

@router.post(
    "/process-document",
    response_model=ObjectionsResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def process_document(
    file: Optional[UploadFile] = File(None),
    discovery_type: Optional[str] = Form(None, alias="discoveryType"),
    fact_pattern: Optional[str] = Form(None, alias="factPattern"),
    client: CompletionClient = Depends(get_completion_client),
) -> ObjectionsResponse:
    """
    Generate objections for every request in the uploaded document.

    - Without a fact pattern: ``{"objections": ...}`` with blank ANSWER lines
    - With a non-empty fact pattern: ``{"objections": ..., "answers": ...}``
    """
    _require_upload(file, discovery_type)

    try:
        document_text = await _extract_upload(file)

        if fact_pattern and fact_pattern.strip():
            split = await _generate_objections_and_answers(
                client, discovery_type, document_text, fact_pattern
            )
            return ObjectionsResponse(objections=split.objections, answers=split.answers)

        objections = await client.complete(
            OBJECTIONS_SYSTEM_PROMPT,
            build_objections_prompt(discovery_type, document_text),
            max_tokens=settings.OBJECTIONS_MAX_TOKENS,
            fallback="No objections generated",
        )
        return ObjectionsResponse(objections=objections)

    except InvalidRequest:
        raise
    except Exception as exc:
        logger.exception(f"Error processing document {file.filename!r}")
        raise GenerationFailed("Failed to process document") from exc


async def _generate_objections_and_answers(
    client: CompletionClient,
    discovery_type: str,
    document_text: str,
    fact_pattern: str,
) -> SplitResponse:
    """Objections-only and complete responses, per COMBINED_STRATEGY."""
    if settings.COMBINED_STRATEGY == "separate":
        objections = await client.complete(
            OBJECTIONS_SYSTEM_PROMPT,
            build_objections_prompt(discovery_type, document_text),
            max_tokens=settings.OBJECTIONS_MAX_TOKENS,
            fallback="No objections generated",
        )
        answers = await client.complete(
            ANSWERS_SYSTEM_PROMPT,
            build_answers_prompt(discovery_type, document_text, fact_pattern),
            max_tokens=settings.ANSWERS_MAX_TOKENS,
            fallback="No answers generated",
        )
        return SplitResponse(objections=objections, answers=answers)

    reply = await client.complete(
        COMBINED_SYSTEM_PROMPT,
        build_combined_prompt(discovery_type, document_text, fact_pattern),
        max_tokens=settings.COMBINED_MAX_TOKENS,
        fallback="No response generated",
    )
    return split_sections(reply)


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@router.post(
    "/generate-answers",
    response_model=AnswersResponse,
    responses=_ERROR_RESPONSES,
)
async def generate_answers(
    file: Optional[UploadFile] = File(None),
    discovery_type: Optional[str] = Form(None, alias="discoveryType"),
    fact_pattern: Optional[str] = Form(None, alias="factPattern"),
    client: CompletionClient = Depends(get_completion_client),
) -> AnswersResponse:
    """Generate objections plus substantive answers drawn from the fact pattern."""
    _require_upload(file, discovery_type)
    if not fact_pattern or not fact_pattern.strip():
        raise MissingField("Fact pattern not provided")

    try:
        document_text = await _extract_upload(file)
        answers = await client.complete(
            ANSWERS_SYSTEM_PROMPT,
            build_answers_prompt(discovery_type, document_text, fact_pattern),
            max_tokens=settings.ANSWERS_MAX_TOKENS,
            fallback="No answers generated",
        )
        return AnswersResponse(answers=answers)

    except InvalidRequest:
        raise
    except Exception as exc:
        logger.exception(f"Error generating answers for {file.filename!r}")
        raise GenerationFailed("Failed to generate answers") from exc


# ---------------------------------------------------------------------------
# DOCX export
# ---------------------------------------------------------------------------

@router.post(
    "/generate-docx",
    response_class=Response,
    responses={200: {"content": {DOCX_MEDIA_TYPE: {}}}, **_ERROR_RESPONSES},
)
async def generate_docx(payload: GenerateDocxRequest) -> Response:
    """
    Render generated objections/answers as a Word document attachment.

    Lines are styled by kind: request headers bold, OBJECTION:/ANSWER:
    labels bold with normal-weight content, everything else plain.
    """
    if not payload.objections or not payload.objections.strip():
        raise MissingField("No objections provided")

    filename = safe_filename(payload.filename, settings.DEFAULT_DOCX_FILENAME)

    try:
        data = render_docx(payload.objections, payload.discovery_type)
    except Exception as exc:
        logger.exception("Error generating DOCX")
        raise GenerationFailed("Failed to generate document") from exc

    return Response(
        content=data,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def safe_filename(name: Optional[str], default: str) -> str:
    """
    Reduce a caller-supplied filename to a safe ASCII basename.

    Directory components are dropped and anything outside
    ``[A-Za-z0-9._ -]`` becomes ``_``.  Falls back to *default* when
    nothing usable is left.
    """
    if not name:
        return default
    base = PurePosixPath(name.replace("\\", "/")).name
    base = _UNSAFE_FILENAME_CHARS.sub("_", base).strip(" .")
    return base or default


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_upload(file: Optional[UploadFile], discovery_type: Optional[str]) -> None:
    """400 before any extraction or completion call if file or type is absent."""
    if file is None or not file.filename:
        raise MissingField("No file uploaded")
    if not discovery_type:
        raise MissingField("Discovery type not specified")


async def _extract_upload(file: UploadFile) -> str:
    """Read the upload (size-capped) and return its non-empty text."""
    data = await _read_upload(file)
    logger.info(f"Received {file.filename!r} ({len(data):,} bytes, {file.content_type})")

    document_text = await DocumentParser().extract_text(
        data, file.content_type, file.filename
    )
    if not document_text.strip():
        raise NoExtractableText("No text could be extracted from the file")
    return document_text


async def _read_upload(file: UploadFile) -> bytes:
    """Read an upload in 1 MB slices, enforcing MAX_FILE_SIZE."""
    chunks: List[bytes] = []
    size = 0
    while True:
        chunk = await file.read(1024 * 1024)
        if not chunk:
            break
        size += len(chunk)
        if size > settings.MAX_FILE_SIZE:
            raise FileTooLarge(
                f"File exceeds the {settings.MAX_FILE_SIZE // (1024 * 1024)} MB size limit."
            )
        chunks.append(chunk)
    return b"".join(chunks)
