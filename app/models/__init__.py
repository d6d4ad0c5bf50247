"""Schema models for the discovery objections backend."""
from app.models.schemas import (
    AnswersResponse,
    DiscoveryType,
    ErrorResponse,
    GenerateDocxRequest,
    HealthCheckResponse,
    ObjectionsResponse,
    request_label,
    request_label_upper,
)

__all__ = [
    "AnswersResponse",
    "DiscoveryType",
    "ErrorResponse",
    "GenerateDocxRequest",
    "HealthCheckResponse",
    "ObjectionsResponse",
    "request_label",
    "request_label_upper",
]
