"""Aggregate statistics over logged predictions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
import math
from typing import Any, Iterable

from unified_ai_platform.history.store import PredictionRecord

CONFIDENCE_BUCKETS = ("0-25%", "25-50%", "50-75%", "75-100%")
HIGH_RISK_LEVELS = ("high", "critical")
TREND_DAYS = 7


@dataclass(frozen=True)
class DailyTrend:
    day: date
    predictions: int
    avg_confidence: int


@dataclass(frozen=True)
class AnalyticsSummary:
    total: int
    avg_confidence: float
    high_risk_count: int
    module_distribution: dict[str, int] = field(default_factory=dict)
    risk_distribution: dict[str, int] = field(default_factory=dict)
    confidence_buckets: dict[str, int] = field(default_factory=dict)
    trend: list[DailyTrend] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "avg_confidence": self.avg_confidence,
            "high_risk_count": self.high_risk_count,
            "module_distribution": dict(self.module_distribution),
            "risk_distribution": dict(self.risk_distribution),
            "confidence_buckets": dict(self.confidence_buckets),
            "trend": [
                {
                    "date": item.day.isoformat(),
                    "predictions": item.predictions,
                    "avg_confidence": item.avg_confidence,
                }
                for item in self.trend
            ],
        }


def module_label(module_type: str) -> str:
    return " ".join(part.capitalize() for part in module_type.split("_") if part)


def confidence_bucket(confidence: float) -> str:
    percent = confidence * 100
    if percent <= 25:
        return CONFIDENCE_BUCKETS[0]
    if percent <= 50:
        return CONFIDENCE_BUCKETS[1]
    if percent <= 75:
        return CONFIDENCE_BUCKETS[2]
    return CONFIDENCE_BUCKETS[3]


def _avg_percent(records: list[PredictionRecord]) -> int:
    if not records:
        return 0
    return math.floor(sum(item.confidence * 100 for item in records) / len(records) + 0.5)


def summarize(records: Iterable[PredictionRecord], today: date) -> AnalyticsSummary:
    """Summarize records the way the analytics dashboard charts them."""

    items = list(records)
    modules: dict[str, int] = {}
    risks: dict[str, int] = {}
    buckets = {name: 0 for name in CONFIDENCE_BUCKETS}
    for item in items:
        label = module_label(item.module_type.value)
        modules[label] = modules.get(label, 0) + 1
        risk = item.risk_level or "unknown"
        risks[risk] = risks.get(risk, 0) + 1
        buckets[confidence_bucket(item.confidence)] += 1

    trend = []
    for offset in range(TREND_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        same_day = [item for item in items if item.created_at.date() == day]
        trend.append(DailyTrend(day=day, predictions=len(same_day), avg_confidence=_avg_percent(same_day)))

    return AnalyticsSummary(
        total=len(items),
        avg_confidence=(sum(item.confidence for item in items) / len(items)) if items else 0.0,
        high_risk_count=sum(1 for item in items if item.risk_level in HIGH_RISK_LEVELS),
        module_distribution=modules,
        risk_distribution=risks,
        confidence_buckets=buckets,
        trend=trend,
    )
