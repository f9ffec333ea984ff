"""Feasibility service: validation, deterministic classification, advisory reconciliation."""

from .reconciler import ReconciledVerdict, reconcile
from .service import evaluate_feasibility, evaluate_feasibility_async, evaluate_payload_async
from .validators import build_feasibility_input, ensure_weights_sum_to_100

__all__ = [
    "ReconciledVerdict",
    "reconcile",
    "evaluate_feasibility",
    "evaluate_feasibility_async",
    "evaluate_payload_async",
    "build_feasibility_input",
    "ensure_weights_sum_to_100",
]
