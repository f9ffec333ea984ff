from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

WEIGHT_TOLERANCE = 0.01


@dataclass(frozen=True)
class GradedCategory:
    name: str
    weight: float
    score: float


@dataclass(frozen=True)
class FeasibilityInput:
    categories: Tuple[GradedCategory, ...]
    final_weight: float
    desired_grade: float


@dataclass(frozen=True)
class WeightCheck:
    ok: bool
    total: float


@dataclass(frozen=True)
class Achieved:
    current_score: float

    @property
    def kind(self) -> str:
        return "achieved"


@dataclass(frozen=True)
class Impossible:
    reason: str
    required_score: Optional[float] = None

    @property
    def kind(self) -> str:
        return "impossible"


@dataclass(frozen=True)
class Achievable:
    required_score: float

    @property
    def kind(self) -> str:
        return "success"


FeasibilityResult = Union[Achieved, Impossible, Achievable]


def check_weights(categories: Iterable[GradedCategory], final_weight: float) -> WeightCheck:
    total = sum(float(c.weight) for c in categories) + float(final_weight)
    # selisih float mis. 100.01 - 100.0 sedikit di atas 0.01, dibulatkan dulu
    return WeightCheck(ok=round(abs(total - 100.0), 9) <= WEIGHT_TOLERANCE, total=total)


def calculate_current_score(categories: Sequence[GradedCategory]) -> float:
    return sum((float(c.score) / 100.0) * float(c.weight) for c in categories)


def calculate_required_score(current_score: float, final_weight: float, desired_grade: float) -> float:
    return (float(desired_grade) - float(current_score)) / float(final_weight) * 100.0


def classify_feasibility(current_score: float, final_weight: float, desired_grade: float) -> FeasibilityResult:
    """
    Klasifikasi deterministik, aturan pertama yang cocok menang:

    1. bobot sisa 0 -> Achieved bila skor sekarang >= target, selain itu Impossible
    2. required = (target - skor sekarang) / bobot sisa * 100
    3. required > 100 -> Impossible
    4. required <= 0 -> Achieved
    5. selain itu -> Achievable(required)

    Perbandingan memakai nilai mentah (tanpa pembulatan).
    """
    if final_weight == 0:
        if current_score >= desired_grade:
            return Achieved(current_score=current_score)
        return Impossible(reason="remaining_weight_zero")

    required = calculate_required_score(current_score, final_weight, desired_grade)
    if required > 100:
        return Impossible(reason="required_above_maximum", required_score=required)
    if required <= 0:
        return Achieved(current_score=current_score)
    return Achievable(required_score=required)


def evaluate_input(data: FeasibilityInput) -> Tuple[float, FeasibilityResult]:
    current = calculate_current_score(data.categories)
    return current, classify_feasibility(current, data.final_weight, data.desired_grade)
