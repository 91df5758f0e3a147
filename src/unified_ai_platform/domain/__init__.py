"""Domain types shared by the scoring engine and the services around it."""

from unified_ai_platform.domain.models import ModuleType, PredictionResult, RiskLevel

__all__ = ["ModuleType", "PredictionResult", "RiskLevel"]
