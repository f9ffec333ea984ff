from __future__ import annotations

from .grade_calculator import Achievable, Achieved, FeasibilityResult, Impossible


def fmt_pct(value: float) -> str:
    return f"{float(value):.1f}%"


def weight_sum_message(total: float) -> str:
    return f"The sum of all weights must be 100%. Current sum: {float(total):.2f}%"


def build_result_message(
    result: FeasibilityResult,
    *,
    current_score: float,
    final_weight: float,
    desired_grade: float,
) -> str:
    """Pesan siap tampil untuk hasil klasifikasi deterministik (angka 1 desimal)."""
    if isinstance(result, Achievable):
        return (
            f"You need to score at least {fmt_pct(result.required_score)} on the final exam "
            f"to get a {fmt_pct(desired_grade)} in the course."
        )

    if isinstance(result, Achieved):
        if final_weight == 0:
            return f"With a final grade of {fmt_pct(current_score)}, you have already achieved your goal!"
        return (
            f"You've already secured your desired grade of {fmt_pct(desired_grade)}! "
            "You can get a 0% on the final and still reach your target."
        )

    if isinstance(result, Impossible):
        if result.required_score is not None:
            return (
                f"To achieve a {fmt_pct(desired_grade)}, you would need to score "
                f"{fmt_pct(result.required_score)} on the final exam, which is not possible."
            )
        return (
            "With a final exam weight of 0, it's impossible to change your current grade "
            f"of {fmt_pct(current_score)}."
        )

    raise TypeError(f"Unknown feasibility result: {result!r}")
