"""In-memory prediction log with stable record IDs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
import threading
from typing import Any

from unified_ai_platform.domain.models import ModuleType, PredictionResult


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(frozen=True)
class PredictionRecord:
    record_id: str
    module_type: ModuleType
    input_data: dict[str, Any]
    prediction: str
    confidence: float
    risk_level: str | None
    created_at: datetime
    explanation: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "module_type": self.module_type.value,
            "input_data": dict(self.input_data),
            "prediction_result": self.prediction,
            "confidence_score": self.confidence,
            "risk_level": self.risk_level,
            "created_at": self.created_at.isoformat(),
            "ai_explanation": self.explanation,
        }


DEFAULT_CAPACITY = 500


class PredictionLog:
    """Bounded record of predictions, newest last.

    Once ``capacity`` records are held the oldest is dropped on each new
    write. Ids keep counting up across evictions. Only the explanation of a
    record may change after it is written; the record object itself is
    replaced, never mutated.
    """

    def __init__(self, clock=_utc_now, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._clock = clock
        self.capacity = capacity
        self._lock = threading.Lock()
        self._records: dict[str, PredictionRecord] = {}
        self._written = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def record(
        self,
        module_type: ModuleType,
        input_data: dict[str, Any],
        result: PredictionResult,
    ) -> PredictionRecord:
        with self._lock:
            self._written += 1
            item = PredictionRecord(
                record_id=f"pred_{self._written:06d}",
                module_type=module_type,
                input_data=dict(input_data),
                prediction=result.prediction,
                confidence=result.confidence,
                risk_level=result.risk_level.value,
                created_at=self._clock(),
            )
            self._records[item.record_id] = item
            while len(self._records) > self.capacity:
                del self._records[next(iter(self._records))]
            return item

    def attach_explanation(self, record_id: str, explanation: str) -> PredictionRecord | None:
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            updated = replace(current, explanation=explanation)
            self._records[record_id] = updated
            return updated

    def get(self, record_id: str) -> PredictionRecord | None:
        with self._lock:
            return self._records.get(record_id)

    def recent(self, limit: int = DEFAULT_CAPACITY) -> list[PredictionRecord]:
        with self._lock:
            if limit <= 0:
                return []
            return list(reversed(list(self._records.values())[-limit:]))
