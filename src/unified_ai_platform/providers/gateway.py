"""Client for an OpenAI-compatible chat-completions gateway."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Iterator, Sequence, TypedDict

import requests

from unified_ai_platform.config.settings import AppConfig
from unified_ai_platform.core.errors import (
    ConfigError,
    CreditsExhaustedError,
    GatewayError,
    RateLimitError,
)

logger = logging.getLogger(__name__)


class ChatMessage(TypedDict):
    role: str
    content: str


@dataclass(frozen=True)
class GatewayConfig:
    url: str
    model: str
    api_key: str | None = None
    timeout_s: float = 30.0

    @classmethod
    def from_app_config(cls, cfg: AppConfig) -> "GatewayConfig":
        return cls(url=cfg.gateway_url, model=cfg.model, api_key=cfg.api_key, timeout_s=cfg.timeout_s)


def _raise_for_gateway_status(response: requests.Response) -> None:
    if response.ok:
        return
    status = response.status_code
    logger.error("AI gateway error: status=%s body=%s", status, response.text[:500])
    if status == 429:
        raise RateLimitError("Rate limit exceeded. Please try again later.")
    if status == 402:
        raise CreditsExhaustedError("AI credits exhausted. Please add credits to continue.")
    raise GatewayError(f"AI Gateway error: {status}")


class GatewayClient:
    def __init__(self, config: GatewayConfig, session: requests.Session | None = None) -> None:
        self.config = config
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        if not self.config.api_key:
            raise ConfigError("Gateway API key is not configured")
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }

    def _post(self, messages: Sequence[ChatMessage], *, stream: bool) -> requests.Response:
        payload: dict[str, Any] = {"model": self.config.model, "messages": list(messages)}
        if stream:
            payload["stream"] = True
        try:
            response = self._session.post(
                self.config.url,
                json=payload,
                headers=self._headers(),
                timeout=self.config.timeout_s,
                stream=stream,
            )
        except requests.RequestException as exc:
            logger.error("AI gateway request failed: %s", exc)
            raise GatewayError(f"AI Gateway request failed: {exc}") from exc
        _raise_for_gateway_status(response)
        return response

    def complete(self, messages: Sequence[ChatMessage]) -> str | None:
        """Run a single-shot completion and return the first choice's text."""

        response = self._post(messages, stream=False)
        try:
            data = response.json()
        except ValueError as exc:
            raise GatewayError("AI Gateway returned invalid JSON") from exc
        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            return None
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        return content if isinstance(content, str) and content else None

    def open_stream(self, messages: Sequence[ChatMessage]) -> Iterator[bytes]:
        """Start a streamed completion and return its raw event-stream chunks.

        The request is sent before this returns, so status errors are raised
        here rather than while the caller is already streaming.
        """

        response = self._post(messages, stream=True)

        def _chunks() -> Iterator[bytes]:
            try:
                for chunk in response.iter_content(chunk_size=None):
                    if chunk:
                        yield chunk
            finally:
                response.close()

        return _chunks()
