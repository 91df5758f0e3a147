from __future__ import annotations

from typing import Any, Iterator

import pytest


class FakeGateway:
    """Stands in for GatewayClient; records the message lists it receives."""

    def __init__(self) -> None:
        self.reply: str | None = "**Why This Prediction**: large amount at night."
        self.chunks: list[bytes] = [b'data: {"choices":[{"delta":{"content":"Hi"}}]}\n\n', b"data: [DONE]\n\n"]
        self.error: Exception | None = None
        self.calls: list[list[dict[str, Any]]] = []

    def complete(self, messages) -> str | None:
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.reply

    def open_stream(self, messages) -> Iterator[bytes]:
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return iter(self.chunks)


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "UNIFIED_AI_PROFILE",
        "UNIFIED_AI_CONFIG_PATH",
        "UNIFIED_AI_GATEWAY_URL",
        "UNIFIED_AI_MODEL",
        "UNIFIED_AI_API_KEY",
        "UNIFIED_AI_TIMEOUT_S",
        "UNIFIED_AI_MAX_MESSAGES",
        "UNIFIED_AI_MAX_MESSAGE_LENGTH",
        "UNIFIED_AI_MAX_CONTEXT_LENGTH",
        "UNIFIED_AI_HISTORY_LIMIT",
        "UNIFIED_AI_LOG_LEVEL",
        "UNIFIED_AI_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
