"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, Field

from unified_ai_platform.core.errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
ENV_PREFIX = "UNIFIED_AI_"


class AppConfig(BaseModel):

    profile: str = Field(default="gateway")
    gateway_url: str = Field(default="https://ai.gateway.lovable.dev/v1/chat/completions")
    model: str = Field(default="google/gemini-2.5-flash")
    api_key: str | None = Field(default=None)
    timeout_s: float = Field(default=30.0)
    max_messages: int = Field(default=50)
    max_message_length: int = Field(default=5000)
    max_context_length: int = Field(default=2000)
    history_limit: int = Field(default=500)
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid config file {p}: {exc}") from exc
    return payload if isinstance(payload, dict) else {}


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    return value if value not in (None, "") else fallback


def _parse_int(raw: Any, fallback: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return fallback
    return value if value > 0 else fallback


def _parse_float(raw: Any, fallback: float) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return fallback
    return value if value > 0 else fallback


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _parse_origins(raw: Any) -> list[str]:
    if isinstance(raw, str):
        return list(dict.fromkeys(item.strip() for item in raw.split(",") if item.strip()))
    if isinstance(raw, list):
        return list(dict.fromkeys(str(item).strip() for item in raw if str(item).strip()))
    return []


def _section(merged: dict[str, Any], name: str) -> dict[str, Any]:
    value = merged.get(name)
    return value if isinstance(value, dict) else {}


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def load_config(
    path: str | Path | None = None,
    *,
    profile_override: str | None = None,
) -> tuple[AppConfig, dict[str, Any]]:
    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)
    profile_map = _section(merged, "profiles")
    chat = _section(merged, "chat")
    history = _section(merged, "history")

    active_profile = str(profile_override or _pick_env("PROFILE", merged.get("profile", "gateway")))
    if profile_map and active_profile not in profile_map:
        raise ConfigError(f"unknown profile: {active_profile}")
    selected_profile = profile_map.get(active_profile, {})
    selected = selected_profile if isinstance(selected_profile, dict) else {}

    def _value(key: str, fallback: Any) -> Any:
        return selected.get(key, merged.get(key, fallback))

    payload = {
        "profile": active_profile,
        "gateway_url": _parse_str(
            _pick_env("GATEWAY_URL", _value("gateway_url", AppConfig.model_fields["gateway_url"].default)),
            AppConfig.model_fields["gateway_url"].default,
        ),
        "model": _parse_str(
            _pick_env("MODEL", _value("model", "google/gemini-2.5-flash")),
            "google/gemini-2.5-flash",
        ),
        "api_key": _pick_env("API_KEY", _value("api_key", None)),
        "timeout_s": _parse_float(_pick_env("TIMEOUT_S", _value("timeout_s", 30.0)), 30.0),
        "max_messages": _parse_int(
            _pick_env("MAX_MESSAGES", chat.get("max_messages", 50)),
            50,
        ),
        "max_message_length": _parse_int(
            _pick_env("MAX_MESSAGE_LENGTH", chat.get("max_message_length", 5000)),
            5000,
        ),
        "max_context_length": _parse_int(
            _pick_env("MAX_CONTEXT_LENGTH", chat.get("max_context_length", 2000)),
            2000,
        ),
        "history_limit": _parse_int(_pick_env("HISTORY_LIMIT", history.get("limit", 500)), 500),
        "log_level": _parse_str(_pick_env("LOG_LEVEL", _value("log_level", "INFO")), "INFO").upper(),
        "cors_origins": _parse_origins(_pick_env("CORS_ORIGINS", _value("cors_origins", ["*"]))) or ["*"],
        "default_config_path": str(default_path),
    }

    cfg = AppConfig.model_validate(payload)
    return cfg, merged
