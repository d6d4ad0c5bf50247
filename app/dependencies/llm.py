"""
Completion-client dependency for FastAPI routes.

The client lives on ``app.state`` (created in the lifespan handler).  Tests
swap it for a fake via ``app.dependency_overrides[get_completion_client]``.
"""
from __future__ import annotations

import logging

from fastapi import Request

from app.exceptions import GenerationFailed
from app.services.llm_client import CompletionClient

logger = logging.getLogger(__name__)


async def get_completion_client(request: Request) -> CompletionClient:
    """Return the process-wide completion client. Raises 500 if startup never built one."""
    client = getattr(request.app.state, "completion_client", None)
    if client is None:
        logger.error("Completion client requested before application startup")
        raise GenerationFailed("Generation service unavailable")
    return client
