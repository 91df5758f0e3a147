"""Plant disease detection from a symptom description."""

from __future__ import annotations

from dataclasses import dataclass

from unified_ai_platform.domain.inputs import PlantObservation
from unified_ai_platform.domain.models import PredictionResult, RiskLevel

HEALTHY = "Healthy"
HEALTHY_CONFIDENCE = 0.75


@dataclass(frozen=True)
class SymptomRule:
    keywords: tuple[str, ...]
    disease: str
    confidence: float


# Checked in order; the first rule with a matching keyword wins.
SYMPTOM_RULES: tuple[SymptomRule, ...] = (
    SymptomRule(("yellow", "spots"), "Leaf Blight", 0.82),
    SymptomRule(("white", "powder"), "Powdery Mildew", 0.85),
    SymptomRule(("wilt", "brown root"), "Root Rot", 0.78),
    SymptomRule(("mosaic", "pattern"), "Mosaic Virus", 0.8),
)


def diagnose(symptoms: str) -> tuple[str, float]:
    text = symptoms.lower()
    for rule in SYMPTOM_RULES:
        if any(keyword in text for keyword in rule.keywords):
            return rule.disease, rule.confidence
    return HEALTHY, HEALTHY_CONFIDENCE


def predict_plant_disease(observation: PlantObservation) -> PredictionResult:
    disease, confidence = diagnose(observation.symptoms)
    if disease == HEALTHY:
        return PredictionResult(prediction="PLANT IS HEALTHY", confidence=confidence, risk_level=RiskLevel.LOW)
    return PredictionResult(
        prediction=f"DETECTED: {disease.upper()}",
        confidence=confidence,
        risk_level=RiskLevel.HIGH,
    )
