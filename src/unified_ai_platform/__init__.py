"""Unified AI platform: rule-based predictions with gateway-backed explanations."""

__version__ = "0.1.0"
