"""Tests for GET /health and the UI page."""
import pytest
from httpx import AsyncClient

from app.config import settings


@pytest.mark.asyncio
async def test_health_returns_200(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "LLM_API_KEY", "sk-test")
    resp = await client.get("/health/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["llm_configured"] is True
    assert data["model"] == settings.LLM_MODEL
    assert "X-Process-Time" in resp.headers


@pytest.mark.asyncio
async def test_health_degraded_without_key(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(settings, "LLM_API_KEY", "")
    resp = await client.get("/health/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "degraded"
    assert data["llm_configured"] is False


@pytest.mark.asyncio
async def test_index_page(client: AsyncClient):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "/process-document" in resp.text
    assert "/generate-docx" in resp.text
    assert "discoveryType" in resp.text
