"""
Chat-completion client for discovery text generation.

Talks to any OpenAI-compatible ``/chat/completions`` endpoint over httpx.
One instance is built at startup (see ``app.main.lifespan``) and handed to
route handlers through ``app.dependencies.llm.get_completion_client``.

Public API
----------
CompletionClient.complete(system_prompt, user_prompt, max_tokens=..., fallback=...) -> str
CompletionClient.aclose()
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from app.config import Settings
from app.exceptions import GenerationFailed

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK = "No response generated"


class CompletionClient:
    """
    Thin adapter over a chat-completion API.

    Sends a system + user message pair with fixed sampling parameters and
    returns the first choice's text.  Transport failures, non-2xx statuses
    and undecodable bodies all surface as ``GenerationFailed``; an empty
    reply is not an error and yields the caller's fallback string.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        temperature: float = 0.3,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CompletionClient":
        """Build a client from application settings."""
        return cls(
            base_url=settings.LLM_BASE_URL,
            api_key=settings.LLM_API_KEY,
            model=settings.LLM_MODEL,
            temperature=settings.LLM_TEMPERATURE,
            timeout=settings.LLM_TIMEOUT,
        )

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        max_tokens: int = 2000,
        fallback: str = DEFAULT_FALLBACK,
    ) -> str:
        """
        Run one chat completion and return the reply text.

        Args:
            system_prompt: Instruction for the ``system`` role.
            user_prompt:   The filled-in prompt template for the ``user`` role.
            max_tokens:    Upper bound on generated tokens.
            fallback:      Returned verbatim when the reply has no content.

        Raises:
            GenerationFailed: the endpoint could not be reached, returned a
                              non-2xx status, or sent back invalid JSON.
        """
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": max_tokens,
            "temperature": self.temperature,
        }

        try:
            resp = await self._client.post("/chat/completions", json=payload)
        except httpx.HTTPError as exc:
            logger.error("complete: request to %s failed — %s", self.base_url, exc)
            raise GenerationFailed("Completion request failed") from exc

        if resp.status_code != 200:
            logger.error(
                "complete: endpoint returned HTTP %d: %s",
                resp.status_code,
                resp.text[:300],
            )
            raise GenerationFailed(f"Completion endpoint returned HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as exc:
            logger.error("complete: response body is not JSON — %s", resp.text[:300])
            raise GenerationFailed("Completion endpoint returned invalid JSON") from exc

        content = _first_choice_content(body)
        if not content:
            logger.warning("complete: empty reply from model %s, using fallback", self.model)
            return fallback

        usage = body.get("usage") if isinstance(body, dict) else None
        if usage:
            logger.info(
                "complete: %s used %s prompt + %s completion tokens",
                self.model,
                usage.get("prompt_tokens"),
                usage.get("completion_tokens"),
            )
        return content

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()


def _first_choice_content(body: Any) -> str:
    """Return ``choices[0].message.content`` or an empty string."""
    if not isinstance(body, dict):
        return ""
    choices = body.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""
