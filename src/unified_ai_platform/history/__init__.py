"""In-memory prediction log and analytics."""

from unified_ai_platform.history.analytics import AnalyticsSummary, summarize
from unified_ai_platform.history.store import PredictionLog, PredictionRecord

__all__ = ["AnalyticsSummary", "PredictionLog", "PredictionRecord", "summarize"]
