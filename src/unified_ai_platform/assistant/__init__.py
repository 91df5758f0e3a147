"""Gateway-backed explanation and chat services."""

from unified_ai_platform.assistant.chat import ChatAssistant, ChatLimits, validate_context, validate_messages
from unified_ai_platform.assistant.explain import ExplanationRequest, Explainer

__all__ = [
    "ChatAssistant",
    "ChatLimits",
    "ExplanationRequest",
    "Explainer",
    "validate_context",
    "validate_messages",
]
