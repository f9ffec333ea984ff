"""
Advisory classifier: opini kedua (LLM) apakah target nilai mustahil dicapai.

Kontrak request/response:
    request  -> {"currentWeightedScore", "finalExamWeight", "desiredGrade"}
    response -> {"isImpossible": bool, "message": str}

`message` wajib kosong bila isImpossible false dan wajib terisi bila true.
Semua pelanggaran bentuk diperlakukan sebagai kegagalan (AdvisoryResponseError).
"""

from __future__ import annotations

import json
import logging
import re
import time
from typing import Any, Dict, Optional, Protocol, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, model_validator

from gradecalc.services.shared.errors import AdvisoryResponseError, ExternalDependencyError

from .llm import ainvoke_text, build_llm
from .logging_utils import log_advisory_ok, log_advisory_start
from .prompt import build_advisory_prompt
from .settings import AdvisorySettings, get_advisory_settings

logger = logging.getLogger(__name__)


def _clamp_pct(value: float) -> float:
    return max(0.0, min(100.0, float(value)))


class AdvisoryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    current_weighted_score: float = Field(alias="currentWeightedScore", ge=0, le=100)
    final_exam_weight: float = Field(alias="finalExamWeight", ge=0, le=100)
    desired_grade: float = Field(alias="desiredGrade", ge=0, le=100)

    @classmethod
    def from_scores(cls, *, current_score: float, final_weight: float, desired_grade: float) -> "AdvisoryRequest":
        # toleransi bobot 0.01 bisa membuat skor sekarang sedikit di atas 100
        return cls(
            current_weighted_score=_clamp_pct(current_score),
            final_exam_weight=_clamp_pct(final_weight),
            desired_grade=_clamp_pct(desired_grade),
        )


class AdvisoryVerdict(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True, extra="ignore")

    is_impossible: bool = Field(alias="isImpossible")
    message: str

    @model_validator(mode="after")
    def _message_matches_verdict(self) -> "AdvisoryVerdict":
        has_message = bool(self.message.strip())
        if self.is_impossible and not has_message:
            raise ValueError("message must be non-empty when isImpossible is true")
        if not self.is_impossible and has_message:
            raise ValueError("message must be empty when isImpossible is false")
        return self


class AdvisoryClassifier(Protocol):
    async def classify(self, request: AdvisoryRequest) -> AdvisoryVerdict:
        ...


def extract_json_object_from_llm_response(text: str) -> Optional[Dict[str, Any]]:
    if not text:
        return None
    raw = text.strip()
    try:
        data = json.loads(raw)
        if isinstance(data, dict):
            return data
    except Exception:
        pass
    m = re.search(r"```(?:json)?\s*(.*?)\s*```", raw, flags=re.DOTALL | re.IGNORECASE)
    if m:
        try:
            data = json.loads(m.group(1).strip())
            if isinstance(data, dict):
                return data
        except Exception:
            pass
    m2 = re.search(r"(\{.*\})", raw, flags=re.DOTALL)
    if m2:
        try:
            data = json.loads(m2.group(1))
            if isinstance(data, dict):
                return data
        except Exception:
            pass
    return None


def parse_advisory_verdict(text: str) -> AdvisoryVerdict:
    data = extract_json_object_from_llm_response(text)
    if data is None:
        raise AdvisoryResponseError("advisory_response_not_json")
    try:
        return AdvisoryVerdict.model_validate(data)
    except PydanticValidationError as exc:
        raise AdvisoryResponseError(f"advisory_schema_violation: {exc.errors()[0].get('msg', '')}") from exc


class StaticAdvisoryClassifier:
    """Advisory dengan jawaban tetap (untuk test dan mode offline)."""

    def __init__(self, verdicts: Sequence[AdvisoryVerdict] | AdvisoryVerdict | None = None, *, error: Exception | None = None):
        if isinstance(verdicts, AdvisoryVerdict):
            verdicts = [verdicts]
        self._verdicts = list(verdicts or [AdvisoryVerdict(is_impossible=False, message="")])
        self._error = error
        self.requests: list[AdvisoryRequest] = []

    async def classify(self, request: AdvisoryRequest) -> AdvisoryVerdict:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        idx = min(len(self.requests) - 1, len(self._verdicts) - 1)
        return self._verdicts[idx]


class LLMAdvisoryClassifier:
    def __init__(self, cfg: AdvisorySettings, *, llm: Any = None):
        self.cfg = cfg
        self._llm = llm if llm is not None else build_llm(cfg)

    async def classify(self, request: AdvisoryRequest) -> AdvisoryVerdict:
        prompt = build_advisory_prompt(
            current_weighted_score=request.current_weighted_score,
            final_exam_weight=request.final_exam_weight,
            desired_grade=request.desired_grade,
        )
        log_advisory_start(logger, self.cfg.model, self.cfg.timeout_s)
        t0 = time.time()
        try:
            text = await ainvoke_text(self._llm, prompt)
        except Exception as exc:
            raise ExternalDependencyError(f"advisory_call_failed: {exc}") from exc

        verdict = parse_advisory_verdict(text)
        log_advisory_ok(logger, self.cfg.model, verdict.is_impossible, int(max((time.time() - t0) * 1000, 0)))
        return verdict


def get_advisory_classifier(cfg: AdvisorySettings | None = None) -> Optional[AdvisoryClassifier]:
    cfg = cfg or get_advisory_settings()
    if not cfg.enabled or not cfg.api_key:
        return None
    try:
        return LLMAdvisoryClassifier(cfg)
    except Exception as e:
        logger.warning(" [ADVISORY] init gagal: %s", e)
        return None
