from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from django.core.management.base import BaseCommand, CommandError

from gradecalc.services.feasibility import build_feasibility_input, evaluate_feasibility
from gradecalc.services.shared.errors import ValidationError
from gradecalc.views import GENERIC_ERROR_MESSAGE

logger = logging.getLogger(__name__)

# contoh bawaan form kalkulator (bobot 20 + 25 + final 30 = 75, sengaja belum 100)
DEFAULT_CATEGORIES: List[Dict[str, Any]] = [
    {"name": "Homework", "weight": 20, "score": 95},
    {"name": "Midterm 1", "weight": 25, "score": 88},
]
DEFAULT_FINAL_WEIGHT = 30.0
DEFAULT_DESIRED_GRADE = 90.0


def parse_category_arg(raw: str) -> Dict[str, Any]:
    # format NAME:WEIGHT:SCORE, nama boleh mengandung ':'
    parts = str(raw or "").rsplit(":", 2)
    if len(parts) != 3:
        raise CommandError(f"Invalid --category '{raw}'. Use NAME:WEIGHT:SCORE, e.g. 'Homework:20:95'.")
    name, weight, score = parts
    return {"name": name.strip(), "weight": weight.strip(), "score": score.strip()}


class Command(BaseCommand):
    help = "Hitung nilai minimal ujian akhir untuk mencapai target nilai mata kuliah."

    def add_arguments(self, parser):
        parser.add_argument(
            "--category",
            action="append",
            default=[],
            help="Graded category as NAME:WEIGHT:SCORE (repeatable)",
        )
        parser.add_argument("--final-weight", type=str, default=str(DEFAULT_FINAL_WEIGHT), help="Final exam weight (0-100)")
        parser.add_argument("--desired", type=str, default=str(DEFAULT_DESIRED_GRADE), help="Desired course grade (0-100)")
        parser.add_argument("--no-advisory", action="store_true", help="Skip the LLM advisory check")
        parser.add_argument("--json", action="store_true", help="Print the full result payload as JSON")

    def handle(self, *args, **options):
        raw_categories = options.get("category") or []
        categories = [parse_category_arg(x) for x in raw_categories] if raw_categories else list(DEFAULT_CATEGORIES)
        payload = {
            "categories": categories,
            "finalExamWeight": options.get("final_weight"),
            "desiredGrade": options.get("desired"),
        }

        kwargs: Dict[str, Any] = {"request_id": "cli"}
        if options.get("no_advisory"):
            kwargs["advisory"] = None

        try:
            outcome = evaluate_feasibility(build_feasibility_input(payload), **kwargs)
        except ValidationError as e:
            raise CommandError(f"{e.error_code}: {e.message}")
        except Exception as e:
            logger.error(f" [GRADE_CHECK CRASH] err={repr(e)}", exc_info=True)
            raise CommandError(f"INTERNAL_ERROR: {GENERIC_ERROR_MESSAGE}")

        if options.get("json"):
            self.stdout.write(json.dumps(outcome.as_payload(), indent=2))
            return

        style = {
            "success": self.style.SUCCESS,
            "achieved": self.style.SUCCESS,
            "impossible": self.style.ERROR,
        }.get(outcome.kind, self.style.NOTICE)
        self.stdout.write(style(f"[{outcome.kind}] {outcome.message}"))
        self.stdout.write(f"Current weighted score : {outcome.current_score:.1f}%")
        for w in outcome.warnings:
            self.stdout.write(self.style.WARNING(f"warning {w['code']}: {w['message']}"))
