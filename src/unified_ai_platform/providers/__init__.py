"""Hosted model gateway adapters."""

from unified_ai_platform.providers.gateway import ChatMessage, GatewayClient, GatewayConfig

__all__ = ["ChatMessage", "GatewayClient", "GatewayConfig"]
