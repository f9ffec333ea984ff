"""Academic domain modules for grade feasibility calculation."""

from .grade_calculator import (
    WEIGHT_TOLERANCE,
    Achievable,
    Achieved,
    FeasibilityInput,
    FeasibilityResult,
    GradedCategory,
    Impossible,
    WeightCheck,
    calculate_current_score,
    calculate_required_score,
    check_weights,
    classify_feasibility,
    evaluate_input,
)
from .messages import build_result_message, fmt_pct, weight_sum_message

__all__ = [
    "WEIGHT_TOLERANCE",
    "Achievable",
    "Achieved",
    "FeasibilityInput",
    "FeasibilityResult",
    "GradedCategory",
    "Impossible",
    "WeightCheck",
    "calculate_current_score",
    "calculate_required_score",
    "check_weights",
    "classify_feasibility",
    "evaluate_input",
    "build_result_message",
    "fmt_pct",
    "weight_sum_message",
]
