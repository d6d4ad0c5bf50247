"""
Shared fixtures for the discovery objections backend tests.

The completion client is replaced with an in-memory fake through
``app.dependency_overrides`` so no test reaches a real LLM endpoint.
"""
from __future__ import annotations

import io
from typing import AsyncGenerator, Dict, List, Optional

import pytest
import pytest_asyncio
from docx import Document
from httpx import ASGITransport, AsyncClient

from app.dependencies.llm import get_completion_client
from app.exceptions import GenerationFailed
from app.main import app


class FakeCompletionClient:
    """Records every call and returns queued replies in order."""

    def __init__(self) -> None:
        self.replies: List[str] = []
        self.calls: List[Dict] = []
        self.error: Optional[Exception] = None

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_tokens: int = 2000,
        fallback: str = "No response generated",
    ) -> str:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "max_tokens": max_tokens,
                "fallback": fallback,
            }
        )
        if self.error is not None:
            raise self.error
        reply = self.replies.pop(0) if self.replies else ""
        return reply or fallback

    async def aclose(self) -> None:
        pass


# ---------------------------------------------------------------------------
# Per-test fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_llm() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest_asyncio.fixture
async def client(fake_llm: FakeCompletionClient) -> AsyncGenerator[AsyncClient, None]:
    """
    httpx AsyncClient wired to the FastAPI app with the completion client
    dependency overridden to return ``fake_llm``.
    """
    app.dependency_overrides[get_completion_client] = lambda: fake_llm

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

SAMPLE_REQUESTS = (
    "SPECIAL INTERROGATORY NO. 1: State all facts supporting your claim.\n"
    "SPECIAL INTERROGATORY NO. 2: Identify every witness to the incident.\n"
)

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def make_docx(*paragraphs: str) -> bytes:
    """Return .docx bytes containing the given paragraphs."""
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def generation_failure() -> GenerationFailed:
    return GenerationFailed("Completion endpoint returned HTTP 502")
