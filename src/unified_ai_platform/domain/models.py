"""Prediction result and enumerations."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]


_RISK_RANK = {
    RiskLevel.LOW: 0,
    RiskLevel.MEDIUM: 1,
    RiskLevel.HIGH: 2,
    RiskLevel.CRITICAL: 3,
}


class ModuleType(str, Enum):
    """Identifiers of the prediction modules, as stored with each logged prediction."""

    FRAUD_UPI = "fraud_upi"
    FRAUD_CREDIT_CARD = "fraud_credit_card"
    FRAUD_PHISHING = "fraud_phishing"
    CONTENT_FAKE_NEWS = "content_fake_news"
    CONTENT_FAKE_REVIEW = "content_fake_review"
    CONTENT_CYBERBULLYING = "content_cyberbullying"
    HEALTH_STRESS = "health_stress"
    HEALTH_DIABETES = "health_diabetes"
    ENVIRONMENT_CROP = "environment_crop"
    ENVIRONMENT_AIR_QUALITY = "environment_air_quality"
    IMAGE_PLANT_DISEASE = "image_plant_disease"


class PredictionResult(BaseModel):
    """Outcome of one scoring call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prediction: str
    confidence: float
    risk_level: RiskLevel = Field(alias="riskLevel")

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)
