"""Shared derivation helpers: score-to-tier mapping and confidence clamping."""

from __future__ import annotations

from typing import Iterable, Sequence

from unified_ai_platform.domain.models import RiskLevel

Thresholds = Sequence[tuple[float, RiskLevel]]


def tier_for(score: float, thresholds: Thresholds, default: RiskLevel = RiskLevel.LOW) -> RiskLevel:
    """Return the level of the first ``(bound, level)`` pair with ``score > bound``.

    Pairs are checked in the order given, so callers list bounds from highest to
    lowest. ``default`` applies when no bound is exceeded.
    """

    for bound, level in thresholds:
        if score > bound:
            return level
    return default


def capped(base: float, score: float, ceiling: float, *, scale: float = 1.0) -> float:
    return min(ceiling, base + score * scale)


def add_per_match(score: float, text: str, terms: Iterable[str], weight: float) -> float:
    # One addition per matched term; keeps float accumulation order stable.
    for term in terms:
        if term in text:
            score += weight
    return score
