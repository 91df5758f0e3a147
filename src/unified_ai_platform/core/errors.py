"""Custom exceptions for the platform."""

from __future__ import annotations


class PlatformError(Exception):
    """Base exception for application-level errors."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ConfigError(PlatformError):
    """Raised when configuration cannot be loaded or validated."""


class InputValidationError(PlatformError):
    """Raised when caller input is rejected before it reaches a scorer or the gateway."""

    status_code = 400

    def __init__(self, message: str, *, errors: list[dict[str, str]] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class UnknownModuleError(PlatformError):
    status_code = 404


class GatewayError(PlatformError):
    """Raised when the hosted chat-completions gateway fails."""


class RateLimitError(GatewayError):
    status_code = 429


class CreditsExhaustedError(GatewayError):
    status_code = 402
