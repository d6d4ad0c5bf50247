"""
Pydantic schemas for request/response validation.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DiscoveryType(str, Enum):
    """Kinds of discovery document the generator understands."""

    INTERROGATORIES = "interrogatories"
    REQUEST_FOR_DOCUMENTS = "request-for-documents"
    REQUEST_FOR_ADMISSIONS = "request-for-admissions"


# Header labels as they appear in "SPECIAL <LABEL> NO. <n>:" lines.
# Anything unrecognised falls through to the admissions label.
_REQUEST_LABELS = {
    DiscoveryType.INTERROGATORIES.value: "Interrogatory",
    DiscoveryType.REQUEST_FOR_DOCUMENTS.value: "Request for Production",
}
_DEFAULT_REQUEST_LABEL = "Request for Admission"


def request_label(discovery_type: str) -> str:
    """Title-case label for a discovery type, e.g. ``"Request for Production"``."""
    return _REQUEST_LABELS.get(discovery_type, _DEFAULT_REQUEST_LABEL)


def request_label_upper(discovery_type: str) -> str:
    """Upper-case label for a discovery type, e.g. ``"INTERROGATORY"``."""
    return request_label(discovery_type).upper()


# Generation responses
class ObjectionsResponse(BaseModel):
    """Response for /process-document.  ``answers`` only set with a fact pattern."""

    objections: str
    answers: Optional[str] = None


class AnswersResponse(BaseModel):
    """Response for /generate-answers."""

    answers: str


# DOCX export
class GenerateDocxRequest(BaseModel):
    """
    JSON body for /generate-docx.

    Fields are optional at the schema level so that a missing ``objections``
    reaches the handler and is reported as a 400 rather than a 422.
    """

    objections: Optional[str] = None
    discovery_type: Optional[str] = Field(None, alias="discoveryType")
    filename: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str


class HealthCheckResponse(BaseModel):
    """Schema for health check endpoint."""

    status: str
    llm_configured: bool
    model: str
    timestamp: datetime
    version: str = "0.1.0"
