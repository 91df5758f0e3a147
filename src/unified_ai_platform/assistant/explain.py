"""Natural-language explanations for predictions, produced by the gateway."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from unified_ai_platform.assistant.prompts import EXPLAIN_SYSTEM_PROMPT, build_explanation_prompt
from unified_ai_platform.domain.models import ModuleType, PredictionResult, RiskLevel
from unified_ai_platform.providers.gateway import GatewayClient

logger = logging.getLogger(__name__)

FALLBACK_EXPLANATION = "Unable to generate explanation."


class ExplanationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    module_type: ModuleType = Field(alias="moduleType")
    input_data: dict[str, Any] = Field(default_factory=dict, alias="inputData")
    prediction: str
    confidence: float = Field(ge=0.0, le=1.0)
    risk_level: RiskLevel = Field(alias="riskLevel")

    @classmethod
    def for_result(
        cls,
        module_type: ModuleType,
        input_data: dict[str, Any],
        result: PredictionResult,
    ) -> "ExplanationRequest":
        return cls(
            module_type=module_type,
            input_data=input_data,
            prediction=result.prediction,
            confidence=result.confidence,
            risk_level=result.risk_level,
        )


class Explainer:
    def __init__(self, client: GatewayClient) -> None:
        self.client = client

    def explain(self, request: ExplanationRequest) -> str:
        logger.info(
            "AI explain request: module=%s prediction=%s confidence=%.2f",
            request.module_type.value,
            request.prediction,
            request.confidence,
        )
        user_prompt = build_explanation_prompt(
            module_type=request.module_type.value,
            input_data=request.input_data,
            prediction=request.prediction,
            confidence=request.confidence,
            risk_level=request.risk_level.value,
        )
        text = self.client.complete(
            [
                {"role": "system", "content": EXPLAIN_SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ]
        )
        if text is None:
            logger.warning("AI gateway returned no explanation content")
            return FALLBACK_EXPLANATION
        return text
