"""Feasibility input validators."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping

from gradecalc.academic.grade_calculator import FeasibilityInput, GradedCategory, check_weights
from gradecalc.academic.messages import weight_sum_message
from gradecalc.services.shared.errors import ValidationError


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def coerce_percentage(value: Any, *, field: str) -> float:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field}: Must be a number.", error_code="INVALID_NUMBER", field=field)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError(f"{field}: Must be a number.", error_code="INVALID_NUMBER", field=field)
    try:
        number = float(value)
    except OverflowError:
        # integer JSON terlalu besar untuk float
        msg = "Cannot be negative." if value < 0 else "Cannot be over 100."
        raise ValidationError(f"{field}: {msg}", error_code="OUT_OF_RANGE", field=field)
    except (TypeError, ValueError):
        raise ValidationError(f"{field}: Must be a number.", error_code="INVALID_NUMBER", field=field)
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{field}: Must be a number.", error_code="INVALID_NUMBER", field=field)
    if number < 0:
        raise ValidationError(f"{field}: Cannot be negative.", error_code="OUT_OF_RANGE", field=field)
    if number > 100:
        raise ValidationError(f"{field}: Cannot be over 100.", error_code="OUT_OF_RANGE", field=field)
    return number


def parse_categories(raw: Any) -> List[GradedCategory]:
    if not isinstance(raw, list) or not raw:
        raise ValidationError(
            "At least one category is required.",
            error_code="NO_CATEGORIES",
            field="categories",
        )
    out: List[GradedCategory] = []
    for idx, item in enumerate(raw):
        prefix = f"categories[{idx}]"
        if not isinstance(item, Mapping):
            raise ValidationError(f"{prefix}: Category must be an object.", error_code="INVALID_PAYLOAD", field=prefix)
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(f"{prefix}.name: Name is required.", error_code="INVALID_NAME", field=f"{prefix}.name")
        out.append(
            GradedCategory(
                name=name.strip(),
                weight=coerce_percentage(item.get("weight"), field=f"{prefix}.weight"),
                score=coerce_percentage(item.get("score"), field=f"{prefix}.score"),
            )
        )
    return out


def ensure_weights_sum_to_100(data: FeasibilityInput) -> float:
    check = check_weights(data.categories, data.final_weight)
    if not check.ok:
        raise ValidationError(
            weight_sum_message(check.total),
            error_code="WEIGHT_SUM_INVALID",
            observed_sum=check.total,
        )
    return check.total


def build_feasibility_input(data: Dict[str, Any]) -> FeasibilityInput:
    """
    Payload mentah (JSON/CLI) -> FeasibilityInput yang sudah tervalidasi per field.

    Invariant jumlah bobot 100 dicek terpisah oleh ensure_weights_sum_to_100,
    tepat sebelum perhitungan.
    """
    if not isinstance(data, Mapping):
        raise ValidationError("Payload must be a JSON object.", error_code="INVALID_PAYLOAD")

    categories = parse_categories(data.get("categories"))
    final_weight = coerce_percentage(
        _first_present(data, "finalExamWeight", "final_weight", "finalWeight"),
        field="finalExamWeight",
    )
    desired_grade = coerce_percentage(
        _first_present(data, "desiredGrade", "desired_grade"),
        field="desiredGrade",
    )
    return FeasibilityInput(
        categories=tuple(categories),
        final_weight=final_weight,
        desired_grade=desired_grade,
    )
