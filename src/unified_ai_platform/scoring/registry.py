"""Module registry: maps each module identifier to its input model and scorer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from pydantic import ValidationError

from unified_ai_platform.core.errors import InputValidationError, UnknownModuleError
from unified_ai_platform.domain import inputs
from unified_ai_platform.domain.models import ModuleType, PredictionResult
from unified_ai_platform.scoring import content, environment, fraud, health, image


@dataclass(frozen=True)
class ScoringModule:
    module_type: ModuleType
    title: str
    input_model: type[inputs.ScoringInput]
    scorer: Callable[[Any], PredictionResult]

    def input_fields(self) -> list[str]:
        return [field.alias or name for name, field in self.input_model.model_fields.items()]


_MODULES: tuple[ScoringModule, ...] = (
    ScoringModule(ModuleType.FRAUD_UPI, "UPI Fraud Detection", inputs.UpiTransaction, fraud.predict_upi_fraud),
    ScoringModule(
        ModuleType.FRAUD_CREDIT_CARD,
        "Credit Card Fraud",
        inputs.CardTransaction,
        fraud.predict_credit_card_fraud,
    ),
    ScoringModule(
        ModuleType.FRAUD_PHISHING,
        "Phishing URL Detection",
        inputs.UrlSample,
        fraud.predict_phishing_url,
    ),
    ScoringModule(
        ModuleType.CONTENT_FAKE_NEWS,
        "Fake News Detection",
        inputs.NewsArticle,
        content.predict_fake_news,
    ),
    ScoringModule(
        ModuleType.CONTENT_FAKE_REVIEW,
        "Fake Review Detection",
        inputs.ProductReview,
        content.predict_fake_review,
    ),
    ScoringModule(
        ModuleType.CONTENT_CYBERBULLYING,
        "Cyberbullying Detection",
        inputs.ChatMessageSample,
        content.predict_cyberbullying,
    ),
    ScoringModule(ModuleType.HEALTH_STRESS, "Stress Level Analysis", inputs.LifestyleProfile, health.predict_stress),
    ScoringModule(
        ModuleType.HEALTH_DIABETES,
        "Diabetes Risk",
        inputs.HealthProfile,
        health.predict_diabetes_risk,
    ),
    ScoringModule(
        ModuleType.ENVIRONMENT_CROP,
        "Crop Recommendation",
        inputs.SoilConditions,
        environment.predict_crop_recommendation,
    ),
    ScoringModule(
        ModuleType.ENVIRONMENT_AIR_QUALITY,
        "Air Quality Prediction",
        inputs.PollutantReadings,
        environment.predict_air_quality,
    ),
    ScoringModule(
        ModuleType.IMAGE_PLANT_DISEASE,
        "Plant Disease Detection",
        inputs.PlantObservation,
        image.predict_plant_disease,
    ),
)
_BY_TYPE = {item.module_type: item for item in _MODULES}


def list_modules() -> list[ScoringModule]:
    return list(_MODULES)


def resolve_module_type(raw: str | ModuleType) -> ModuleType:
    try:
        return ModuleType(str(raw.value if isinstance(raw, ModuleType) else raw).strip().lower())
    except ValueError as exc:
        raise UnknownModuleError(f"Unknown module: {raw}") from exc


def get_module(module_type: str | ModuleType) -> ScoringModule:
    return _BY_TYPE[resolve_module_type(module_type)]


def _field_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in item.get("loc", ())) or "input",
            "message": str(item.get("msg", "invalid value")),
        }
        for item in exc.errors()
    ]


def parse_input(module_type: str | ModuleType, payload: Mapping[str, Any]) -> inputs.ScoringInput:
    """Validate a raw mapping against the module's input record."""

    module = get_module(module_type)
    if not isinstance(payload, Mapping):
        raise InputValidationError("Input data must be an object")
    try:
        return module.input_model.model_validate(dict(payload))
    except ValidationError as exc:
        errors = _field_errors(exc)
        fields = ", ".join(item["field"] for item in errors)
        raise InputValidationError(
            f"Invalid input for {module.module_type.value}: {fields}",
            errors=errors,
        ) from exc


def predict(module_type: str | ModuleType, payload: Mapping[str, Any]) -> PredictionResult:
    module = get_module(module_type)
    return module.scorer(parse_input(module.module_type, payload))
