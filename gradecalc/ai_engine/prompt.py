ADVISORY_PROMPT_TEMPLATE = """You are a grade calculation expert. Decide whether a student's desired course grade is impossible to reach, given their current weighted score, the weight of the final exam, and the desired grade.

Current Weighted Score: {current_weighted_score}%
Final Exam Weight: {final_exam_weight}%
Desired Grade: {desired_grade}%

Rules:
- Scores on the final exam range from 0% to 100%.
- The final course grade is the current weighted score plus (final exam score / 100 * final exam weight).
- The desired grade is impossible only if even 100% on the final exam would not reach it, or if the final exam weight is 0 and the current weighted score is below the desired grade.
- A current weighted score that already meets the desired grade is NOT impossible.

Answer with ONE JSON object and nothing else:
{{"isImpossible": <true|false>, "message": "<text>"}}

If the grade is impossible, "message" is a concise, direct explanation of why.
If the grade is possible, "message" MUST be an empty string.

Example impossible case:
Current Weighted Score: 60%, Final Exam Weight: 20%, Desired Grade: 90% -> even 100% on the final only reaches 80%.

Example possible cases:
Current Weighted Score: 70%, Final Exam Weight: 30%, Desired Grade: 90%
Current Weighted Score: 85%, Final Exam Weight: 15%, Desired Grade: 88%
Current Weighted Score: 95%, Final Exam Weight: 10%, Desired Grade: 90%
"""


def build_advisory_prompt(*, current_weighted_score: float, final_exam_weight: float, desired_grade: float) -> str:
    return ADVISORY_PROMPT_TEMPLATE.format(
        current_weighted_score=round(float(current_weighted_score), 2),
        final_exam_weight=round(float(final_exam_weight), 2),
        desired_grade=round(float(desired_grade), 2),
    )
