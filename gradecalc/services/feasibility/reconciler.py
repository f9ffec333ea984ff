"""Penggabungan verdict deterministik dengan verdict advisory (LLM)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gradecalc.academic.grade_calculator import FeasibilityResult, Impossible
from gradecalc.academic.messages import build_result_message
from gradecalc.ai_engine.advisory import AdvisoryVerdict
from gradecalc.ai_engine.logging_utils import log_verdict_disagreement
from gradecalc.services.shared.dto import WarningPayload

logger = logging.getLogger(__name__)

POLICY_OVERRIDE = "override"
POLICY_AGREEMENT = "agreement"


@dataclass(frozen=True)
class ReconciledVerdict:
    result: FeasibilityResult
    message: str
    advisory_used: bool
    warnings: List[WarningPayload] = field(default_factory=list)

    @property
    def kind(self) -> str:
        return self.result.kind


def reconcile(
    deterministic: FeasibilityResult,
    advisory: Optional[AdvisoryVerdict],
    *,
    current_score: float,
    final_weight: float,
    desired_grade: float,
    require_agreement: bool = False,
    warnings: Optional[List[WarningPayload]] = None,
) -> ReconciledVerdict:
    """
    advisory None berarti panggilan advisory gagal/tidak tersedia: verdict deterministik dipakai apa adanya.

    Advisory "impossible" menimpa hasil deterministik (policy override). Dengan
    require_agreement=True, advisory hanya dipakai bila hasil deterministik juga Impossible.
    Angka required score selalu dari hitungan deterministik, bukan dari LLM.
    """
    out_warnings: List[WarningPayload] = list(warnings or [])
    local_message = build_result_message(
        deterministic,
        current_score=current_score,
        final_weight=final_weight,
        desired_grade=desired_grade,
    )

    if advisory is None or not advisory.is_impossible:
        return ReconciledVerdict(
            result=deterministic,
            message=local_message,
            advisory_used=advisory is not None,
            warnings=out_warnings,
        )

    agrees = isinstance(deterministic, Impossible)
    policy = POLICY_AGREEMENT if require_agreement else POLICY_OVERRIDE
    if not agrees:
        log_verdict_disagreement(logger, deterministic.kind, policy)

    if agrees or not require_agreement:
        if agrees:
            result = deterministic
        else:
            result = Impossible(reason="advisory_override")
        return ReconciledVerdict(
            result=result,
            message=advisory.message.strip(),
            advisory_used=True,
            warnings=out_warnings,
        )

    out_warnings.append(
        {
            "code": "ADVISORY_DISAGREEMENT",
            "message": "The advisory check reported this target as impossible, but the exact calculation disagrees.",
        }
    )
    return ReconciledVerdict(
        result=deterministic,
        message=local_message,
        advisory_used=True,
        warnings=out_warnings,
    )
