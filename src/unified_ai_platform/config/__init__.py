"""Configuration loading."""

from unified_ai_platform.config.settings import AppConfig, load_config

__all__ = ["AppConfig", "load_config"]
