"""
Exception hierarchy for the discovery objections backend.

Every error carries the HTTP status it maps to; the handler registered in
``app.main`` turns it into a ``{"error": message}`` JSON body.
"""
from fastapi import status


class DiscoveryError(Exception):
    """Base exception for all request-level failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequest(DiscoveryError):
    """Base for errors caused by the client's input (4xx)."""

    status_code = status.HTTP_400_BAD_REQUEST


class MissingField(InvalidRequest):
    """A required form or JSON field was not supplied."""


class UnsupportedFileType(InvalidRequest):
    """The uploaded file is not a Word or plain-text document."""


class NoExtractableText(InvalidRequest):
    """Extraction succeeded but produced only whitespace."""


class FileTooLarge(InvalidRequest):
    """The upload exceeds MAX_FILE_SIZE."""

    status_code = 413


class GenerationFailed(DiscoveryError):
    """The completion endpoint or the DOCX writer failed."""
