"""Chat assistant: request validation and streamed gateway replies."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from typing import Any, Iterator, Mapping

from unified_ai_platform.assistant.prompts import build_chat_system_prompt
from unified_ai_platform.config.settings import AppConfig
from unified_ai_platform.core.errors import CreditsExhaustedError, InputValidationError
from unified_ai_platform.providers.gateway import ChatMessage, GatewayClient

logger = logging.getLogger(__name__)

ALLOWED_ROLES = ("user", "assistant", "system")
MAX_MODULE_NAME_LENGTH = 100
MAX_PREDICTION_LENGTH = 500
CHAT_CREDITS_EXHAUSTED = "AI credits exhausted. Please add credits."


@dataclass(frozen=True)
class ChatLimits:
    max_messages: int = 50
    max_message_length: int = 5000
    max_context_length: int = 2000

    @classmethod
    def from_app_config(cls, cfg: AppConfig) -> "ChatLimits":
        return cls(
            max_messages=cfg.max_messages,
            max_message_length=cfg.max_message_length,
            max_context_length=cfg.max_context_length,
        )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_short_str(value: Any, limit: int) -> bool:
    return isinstance(value, str) and len(value) <= limit


def validate_messages(messages: Any, limits: ChatLimits = ChatLimits()) -> list[ChatMessage]:
    if not isinstance(messages, list):
        raise InputValidationError("Messages must be an array")
    if not messages:
        raise InputValidationError("Messages array cannot be empty")
    if len(messages) > limits.max_messages:
        raise InputValidationError(f"Too many messages. Maximum allowed: {limits.max_messages}")

    validated: list[ChatMessage] = []
    for index, message in enumerate(messages):
        if not isinstance(message, Mapping):
            raise InputValidationError(f"Invalid message at index {index}")
        role = message.get("role")
        if not role or not isinstance(role, str):
            raise InputValidationError(f"Invalid role at message {index}")
        if role not in ALLOWED_ROLES:
            raise InputValidationError(f"Invalid role value at message {index}")
        content = message.get("content")
        if not content or not isinstance(content, str):
            raise InputValidationError(f"Invalid content at message {index}")
        if len(content) > limits.max_message_length:
            raise InputValidationError(
                f"Message {index} exceeds maximum length of {limits.max_message_length} characters"
            )
        validated.append({"role": role, "content": content})
    return validated


def validate_context(context: Any, limits: ChatLimits = ChatLimits()) -> dict[str, Any] | None:
    """Check the optional page context sent along with a chat request."""

    if context is None:
        return None
    if not isinstance(context, Mapping):
        raise InputValidationError("Context must be an object")

    if "currentModule" in context and not _is_short_str(context["currentModule"], MAX_MODULE_NAME_LENGTH):
        raise InputValidationError("Invalid currentModule in context")

    if "lastPrediction" in context:
        last = context["lastPrediction"]
        if not isinstance(last, Mapping):
            raise InputValidationError("Invalid lastPrediction in context")
        if "moduleType" in last and not _is_short_str(last["moduleType"], MAX_MODULE_NAME_LENGTH):
            raise InputValidationError("Invalid moduleType in lastPrediction")
        if "prediction" in last and not _is_short_str(last["prediction"], MAX_PREDICTION_LENGTH):
            raise InputValidationError("Invalid prediction in lastPrediction")
        if "confidence" in last:
            confidence = last["confidence"]
            if not _is_number(confidence) or confidence < 0 or confidence > 100:
                raise InputValidationError("Invalid confidence in lastPrediction")

    size = len(json.dumps(context, separators=(",", ":"), ensure_ascii=False, default=str))
    if size > limits.max_context_length:
        raise InputValidationError(f"Context exceeds maximum size of {limits.max_context_length} characters")
    return dict(context)


class ChatAssistant:
    def __init__(self, client: GatewayClient, limits: ChatLimits | None = None) -> None:
        self.client = client
        self.limits = limits or ChatLimits()

    def build_messages(self, body: Any) -> list[ChatMessage]:
        if not isinstance(body, Mapping):
            raise InputValidationError("Request body must be an object")
        try:
            messages = validate_messages(body.get("messages"), self.limits)
            context = validate_context(body.get("context"), self.limits)
        except InputValidationError as exc:
            logger.info("Chat request rejected: %s", exc.message)
            raise
        logger.info("AI chat request validated: messages=%d has_context=%s", len(messages), bool(context))
        system: ChatMessage = {"role": "system", "content": build_chat_system_prompt(context)}
        return [system, *messages]

    def stream_reply(self, body: Any) -> Iterator[bytes]:
        messages = self.build_messages(body)
        try:
            return self.client.open_stream(messages)
        except CreditsExhaustedError as exc:
            raise CreditsExhaustedError(CHAT_CREDITS_EXHAUSTED) from exc
