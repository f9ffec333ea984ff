from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypedDict


class WarningPayload(TypedDict):
    code: str
    message: str


class AdvisoryPayload(TypedDict):
    used: bool
    is_impossible: Optional[bool]
    message: str


class DeterministicPayload(TypedDict):
    type: str
    required_score: Optional[float]


@dataclass(slots=True)
class FeasibilityOutcome:
    kind: str
    message: str
    current_score: float
    required_score: Optional[float]
    total_weight: float
    advisory: AdvisoryPayload
    deterministic: DeterministicPayload
    warnings: List[WarningPayload] = field(default_factory=list)

    def as_payload(self) -> Dict[str, Any]:
        det_required = self.deterministic.get("required_score")
        return {
            "status": "ok",
            "type": self.kind,
            "message": self.message,
            "current_score": round(self.current_score, 4),
            "required_score": round(self.required_score, 4) if self.required_score is not None else None,
            "total_weight": round(self.total_weight, 4),
            "advisory": dict(self.advisory),
            "deterministic": {
                "type": self.deterministic.get("type"),
                "required_score": round(det_required, 4) if det_required is not None else None,
            },
            "warnings": [dict(w) for w in self.warnings],
        }
