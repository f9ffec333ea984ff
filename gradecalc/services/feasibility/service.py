from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from asgiref.sync import async_to_sync

from gradecalc.academic.grade_calculator import FeasibilityInput, evaluate_input
from gradecalc.ai_engine.advisory import AdvisoryClassifier, AdvisoryRequest, AdvisoryVerdict, get_advisory_classifier
from gradecalc.ai_engine.logging_utils import log_advisory_fail
from gradecalc.ai_engine.settings import AdvisorySettings, get_advisory_settings
from gradecalc.services.shared.dto import FeasibilityOutcome, WarningPayload

from .reconciler import reconcile
from .validators import build_feasibility_input, ensure_weights_sum_to_100

logger = logging.getLogger(__name__)

# penanda "pakai advisory default dari settings"; None berarti advisory dilewati
DEFAULT_ADVISORY: Any = object()

WARNING_MESSAGES = {
    "ADVISORY_TIMEOUT": "The advisory check took too long; showing the exact calculation only.",
    "ADVISORY_FAILED": "The advisory check failed; showing the exact calculation only.",
    "ADVISORY_UNAVAILABLE": "The advisory check is not configured; showing the exact calculation only.",
}


def _warning(code: str) -> WarningPayload:
    return {"code": code, "message": WARNING_MESSAGES[code]}


async def consult_advisory(
    advisory: AdvisoryClassifier,
    request: AdvisoryRequest,
    *,
    timeout_s: float,
    warnings: List[WarningPayload],
) -> Optional[AdvisoryVerdict]:
    """
    Panggil advisory satu kali (tanpa retry). Semua kegagalan diserap di sini dan
    jadi warning non-fatal; CancelledError tetap diteruskan.
    """
    try:
        return await asyncio.wait_for(advisory.classify(request), timeout=timeout_s)
    except asyncio.TimeoutError:
        log_advisory_fail(logger, "ADVISORY_TIMEOUT", f"timeout>{timeout_s}s")
        warnings.append(_warning("ADVISORY_TIMEOUT"))
    except Exception as exc:
        log_advisory_fail(logger, "ADVISORY_FAILED", repr(exc))
        warnings.append(_warning("ADVISORY_FAILED"))
    return None


async def evaluate_feasibility_async(
    data: FeasibilityInput,
    *,
    advisory: Any = DEFAULT_ADVISORY,
    settings: AdvisorySettings | None = None,
    request_id: str = "-",
) -> FeasibilityOutcome:
    cfg = settings or get_advisory_settings()

    # ValidationError di sini -> tidak ada perhitungan sama sekali
    total_weight = ensure_weights_sum_to_100(data)
    current_score, deterministic = evaluate_input(data)
    logger.info(
        " [FEASIBILITY] rid=%s current=%.4f final_weight=%s desired=%s deterministic=%s",
        request_id,
        current_score,
        data.final_weight,
        data.desired_grade,
        deterministic.kind,
    )

    warnings: List[WarningPayload] = []
    if advisory is DEFAULT_ADVISORY:
        advisory = get_advisory_classifier(cfg)
        if advisory is None and cfg.enabled:
            warnings.append(_warning("ADVISORY_UNAVAILABLE"))

    verdict: Optional[AdvisoryVerdict] = None
    if advisory is not None:
        request = AdvisoryRequest.from_scores(
            current_score=current_score,
            final_weight=data.final_weight,
            desired_grade=data.desired_grade,
        )
        verdict = await consult_advisory(advisory, request, timeout_s=cfg.timeout_s, warnings=warnings)

    reconciled = reconcile(
        deterministic,
        verdict,
        current_score=current_score,
        final_weight=data.final_weight,
        desired_grade=data.desired_grade,
        require_agreement=cfg.require_agreement,
        warnings=warnings,
    )
    logger.info(
        " [FEASIBILITY] rid=%s result=%s advisory_used=%s warnings=%s",
        request_id,
        reconciled.kind,
        reconciled.advisory_used,
        [w["code"] for w in reconciled.warnings],
    )

    return FeasibilityOutcome(
        kind=reconciled.kind,
        message=reconciled.message,
        current_score=current_score,
        required_score=getattr(reconciled.result, "required_score", None),
        total_weight=total_weight,
        advisory={
            "used": verdict is not None,
            "is_impossible": verdict.is_impossible if verdict is not None else None,
            "message": verdict.message if verdict is not None else "",
        },
        deterministic={
            "type": deterministic.kind,
            "required_score": getattr(deterministic, "required_score", None),
        },
        warnings=reconciled.warnings,
    )


def evaluate_feasibility(data: FeasibilityInput, **kwargs: Any) -> FeasibilityOutcome:
    return async_to_sync(evaluate_feasibility_async)(data, **kwargs)


async def evaluate_payload_async(payload: Dict[str, Any], **kwargs: Any) -> FeasibilityOutcome:
    return await evaluate_feasibility_async(build_feasibility_input(payload), **kwargs)
