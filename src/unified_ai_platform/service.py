"""Prediction workflow: score, log, and optionally explain."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Mapping

from unified_ai_platform.assistant.explain import ExplanationRequest, Explainer
from unified_ai_platform.core.errors import PlatformError
from unified_ai_platform.domain.models import ModuleType, PredictionResult
from unified_ai_platform.history.store import PredictionLog, PredictionRecord
from unified_ai_platform.scoring.registry import get_module, parse_input

logger = logging.getLogger(__name__)

EXPLANATION_UNAVAILABLE = "Could not generate AI explanation. Prediction still valid."


@dataclass(frozen=True)
class PredictionOutcome:
    record: PredictionRecord
    result: PredictionResult
    explanation: str | None = None
    explanation_error: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.record.record_id,
            "moduleType": self.record.module_type.value,
            **self.result.to_payload(),
            "explanation": self.explanation,
        }
        if self.explanation_error:
            payload["explanationError"] = self.explanation_error
        return payload


class PredictionService:
    def __init__(self, log: PredictionLog, explainer: Explainer | None = None) -> None:
        self.log = log
        self.explainer = explainer

    def run(
        self,
        module_type: str | ModuleType,
        input_data: Mapping[str, Any],
        *,
        explain: bool = False,
    ) -> PredictionOutcome:
        module = get_module(module_type)
        result = module.scorer(parse_input(module.module_type, input_data))
        record = self.log.record(module.module_type, dict(input_data), result)
        logger.info(
            "prediction %s module=%s result=%s confidence=%.2f risk=%s",
            record.record_id,
            module.module_type.value,
            result.prediction,
            result.confidence,
            result.risk_level.value,
        )
        if not explain:
            return PredictionOutcome(record=record, result=result)
        if self.explainer is None:
            return PredictionOutcome(record=record, result=result, explanation_error=EXPLANATION_UNAVAILABLE)

        request = ExplanationRequest.for_result(module.module_type, dict(input_data), result)
        try:
            explanation = self.explainer.explain(request)
        except PlatformError as exc:
            logger.warning("AI explanation failed for %s: %s", record.record_id, exc.message)
            return PredictionOutcome(record=record, result=result, explanation_error=EXPLANATION_UNAVAILABLE)
        updated = self.log.attach_explanation(record.record_id, explanation) or record
        return PredictionOutcome(record=updated, result=result, explanation=explanation)
