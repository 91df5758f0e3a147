"""Deterministic scoring engine."""

from unified_ai_platform.scoring.content import predict_cyberbullying, predict_fake_news, predict_fake_review
from unified_ai_platform.scoring.environment import predict_air_quality, predict_crop_recommendation
from unified_ai_platform.scoring.fraud import predict_credit_card_fraud, predict_phishing_url, predict_upi_fraud
from unified_ai_platform.scoring.health import predict_diabetes_risk, predict_stress
from unified_ai_platform.scoring.image import predict_plant_disease
from unified_ai_platform.scoring.registry import ScoringModule, get_module, list_modules, parse_input, predict

__all__ = [
    "ScoringModule",
    "get_module",
    "list_modules",
    "parse_input",
    "predict",
    "predict_air_quality",
    "predict_credit_card_fraud",
    "predict_crop_recommendation",
    "predict_cyberbullying",
    "predict_diabetes_risk",
    "predict_fake_news",
    "predict_fake_review",
    "predict_phishing_url",
    "predict_plant_disease",
    "predict_stress",
    "predict_upi_fraud",
]
