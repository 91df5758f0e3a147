"""Environment heuristics: crop recommendation and air quality."""

from __future__ import annotations

from dataclasses import dataclass

from unified_ai_platform.domain.inputs import PollutantReadings, SoilConditions
from unified_ai_platform.domain.models import PredictionResult, RiskLevel
from unified_ai_platform.scoring.tiers import capped, tier_for

Range = tuple[float, float]


@dataclass(frozen=True)
class CropProfile:
    """Inclusive growing ranges for one crop."""

    name: str
    nitrogen: Range
    phosphorus: Range
    potassium: Range
    temperature: Range
    humidity: Range
    rainfall: Range


# Table order decides ties.
CROP_TABLE: tuple[CropProfile, ...] = (
    CropProfile("Rice", (80, 120), (40, 60), (40, 60), (20, 30), (60, 80), (100, 200)),
    CropProfile("Wheat", (60, 100), (35, 55), (35, 55), (15, 25), (50, 70), (50, 100)),
    CropProfile("Cotton", (100, 140), (45, 65), (45, 65), (25, 35), (50, 70), (50, 100)),
    CropProfile("Sugarcane", (100, 150), (50, 70), (50, 70), (25, 35), (60, 80), (100, 200)),
    CropProfile("Maize", (80, 120), (40, 60), (35, 55), (20, 30), (50, 70), (60, 120)),
)

# (field, weight); sums to 1.0.
CROP_FIELD_WEIGHTS = (
    ("nitrogen", 0.2),
    ("phosphorus", 0.2),
    ("potassium", 0.15),
    ("temperature", 0.2),
    ("humidity", 0.15),
    ("rainfall", 0.1),
)

# Inverted: a strong match means low risk.
CROP_TIERS = (
    (0.7, RiskLevel.LOW),
    (0.5, RiskLevel.MEDIUM),
)

AIR_COMPONENTS = (
    ("pm25", 35.0, 0.35),
    ("pm10", 50.0, 0.25),
    ("no2", 100.0, 0.15),
    ("so2", 75.0, 0.15),
    ("co", 10.0, 0.10),
)
AIR_CATEGORIES = (
    (0.8, "HAZARDOUS"),
    (0.6, "VERY UNHEALTHY"),
    (0.4, "UNHEALTHY"),
    (0.2, "MODERATE"),
)
AIR_TIERS = (
    (0.6, RiskLevel.CRITICAL),
    (0.4, RiskLevel.HIGH),
    (0.2, RiskLevel.MEDIUM),
)
AIR_CONFIDENCE = 0.88


def crop_match_score(crop: CropProfile, soil: SoilConditions) -> float:
    score = 0.0
    for field_name, weight in CROP_FIELD_WEIGHTS:
        low, high = getattr(crop, field_name)
        if low <= getattr(soil, field_name) <= high:
            score += weight
    return score


def best_crop(soil: SoilConditions) -> tuple[CropProfile, float]:
    """Pick the highest-scoring crop; the earlier entry wins a tie."""

    best, best_score = CROP_TABLE[0], 0.0
    for crop in CROP_TABLE:
        score = crop_match_score(crop, soil)
        if score > best_score:
            best, best_score = crop, score
    return best, best_score


def predict_crop_recommendation(soil: SoilConditions) -> PredictionResult:
    crop, score = best_crop(soil)
    return PredictionResult(
        prediction=f"RECOMMENDED: {crop.name.upper()}",
        confidence=capped(0.5, score, 0.92),
        risk_level=tier_for(score, CROP_TIERS, default=RiskLevel.HIGH),
    )


def air_quality_score(readings: PollutantReadings) -> float:
    score = 0.0
    for field_name, limit, weight in AIR_COMPONENTS:
        score += min(getattr(readings, field_name) / limit, 1) * weight
    return score


def air_quality_category(score: float) -> str:
    for bound, category in AIR_CATEGORIES:
        if score > bound:
            return category
    return "GOOD"


def predict_air_quality(readings: PollutantReadings) -> PredictionResult:
    score = air_quality_score(readings)
    return PredictionResult(
        prediction=f"AIR QUALITY: {air_quality_category(score)}",
        confidence=AIR_CONFIDENCE,
        risk_level=tier_for(score, AIR_TIERS),
    )
