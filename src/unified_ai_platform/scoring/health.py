"""Health heuristics: stress level and diabetes risk."""

from __future__ import annotations

from unified_ai_platform.domain.inputs import HealthProfile, LifestyleProfile
from unified_ai_platform.domain.models import PredictionResult, RiskLevel
from unified_ai_platform.scoring.tiers import capped, tier_for

# Both health modules stop at "high".
HEALTH_TIERS = (
    (0.6, RiskLevel.HIGH),
    (0.4, RiskLevel.MEDIUM),
)


def stress_score(profile: LifestyleProfile) -> float:
    score = 0.0
    if profile.sleep_hours < 6:
        score += 0.3
    elif profile.sleep_hours < 7:
        score += 0.15
    if profile.work_hours > 10:
        score += 0.3
    elif profile.work_hours > 8:
        score += 0.15
    if profile.exercise_minutes < 15:
        score += 0.2
    if profile.social_interaction < 2:
        score += 0.2
    return score


def predict_stress(profile: LifestyleProfile) -> PredictionResult:
    score = stress_score(profile)
    return PredictionResult(
        prediction="HIGH STRESS LEVEL" if score > 0.4 else "MODERATE/LOW STRESS",
        confidence=capped(0.55, score, 0.87, scale=0.5),
        risk_level=tier_for(score, HEALTH_TIERS),
    )


def diabetes_score(profile: HealthProfile) -> float:
    score = 0.0
    if profile.age > 45:
        score += 0.15
    if profile.age > 60:
        score += 0.1
    if profile.bmi > 25:
        score += 0.2
    if profile.bmi > 30:
        score += 0.15
    if profile.family_history:
        score += 0.25
    if profile.physical_activity < 3:
        score += 0.15
    if profile.blood_pressure > 130:
        score += 0.15
    return score


def predict_diabetes_risk(profile: HealthProfile) -> PredictionResult:
    score = diabetes_score(profile)
    return PredictionResult(
        prediction="ELEVATED DIABETES RISK" if score > 0.4 else "LOW/NORMAL RISK",
        confidence=capped(0.5, score, 0.82, scale=0.5),
        risk_level=tier_for(score, HEALTH_TIERS),
    )
