from django.test import SimpleTestCase

from gradecalc.academic.grade_calculator import Achievable, Achieved, Impossible, classify_feasibility
from gradecalc.ai_engine.advisory import AdvisoryVerdict
from gradecalc.services.feasibility.reconciler import reconcile

IMPOSSIBLE = AdvisoryVerdict(is_impossible=True, message="Even a perfect final exam cannot get you there.")
POSSIBLE = AdvisoryVerdict(is_impossible=False, message="")


class ReconcilerTests(SimpleTestCase):
    def _reconcile(self, current, final_weight, desired, advisory, **kwargs):
        det = classify_feasibility(current, final_weight, desired)
        return det, reconcile(
            det,
            advisory,
            current_score=current,
            final_weight=final_weight,
            desired_grade=desired,
            **kwargs,
        )

    def test_advisory_impossible_overrides_achievable(self):
        det, out = self._reconcile(70, 30, 90, IMPOSSIBLE)
        self.assertIsInstance(det, Achievable)
        self.assertEqual(out.kind, "impossible")
        self.assertIsInstance(out.result, Impossible)
        self.assertEqual(out.result.reason, "advisory_override")
        self.assertEqual(out.message, IMPOSSIBLE.message)
        self.assertTrue(out.advisory_used)
        self.assertEqual(out.warnings, [])

    def test_advisory_impossible_agrees_keeps_deterministic_numbers(self):
        det, out = self._reconcile(60, 20, 90, IMPOSSIBLE)
        self.assertIs(out.result, det)
        self.assertEqual(out.message, IMPOSSIBLE.message)

    def test_advisory_possible_uses_deterministic_and_local_message(self):
        det, out = self._reconcile(70, 30, 90, POSSIBLE)
        self.assertIs(out.result, det)
        self.assertEqual(out.kind, "success")
        self.assertIn("66.7%", out.message)
        self.assertTrue(out.advisory_used)

    def test_advisory_possible_cannot_rescue_impossible(self):
        det, out = self._reconcile(60, 20, 90, POSSIBLE)
        self.assertIs(out.result, det)
        self.assertEqual(out.kind, "impossible")
        self.assertIn("150.0%", out.message)

    def test_advisory_failure_returns_deterministic_unmodified(self):
        warnings = [{"code": "ADVISORY_FAILED", "message": "x"}]
        det, out = self._reconcile(95, 10, 90, None, warnings=warnings)
        self.assertIsInstance(det, Achieved)
        self.assertIs(out.result, det)
        self.assertFalse(out.advisory_used)
        self.assertEqual(out.warnings, warnings)
        self.assertIsNot(out.warnings, warnings)

    def test_agreement_mode_ignores_unconfirmed_impossible(self):
        det, out = self._reconcile(70, 30, 90, IMPOSSIBLE, require_agreement=True)
        self.assertIs(out.result, det)
        self.assertEqual(out.kind, "success")
        self.assertEqual([w["code"] for w in out.warnings], ["ADVISORY_DISAGREEMENT"])

    def test_agreement_mode_uses_advisory_message_when_both_impossible(self):
        det, out = self._reconcile(50, 0, 60, IMPOSSIBLE, require_agreement=True)
        self.assertIs(out.result, det)
        self.assertEqual(out.message, IMPOSSIBLE.message)
        self.assertEqual(out.warnings, [])

    def test_disagreement_is_logged(self):
        with self.assertLogs("gradecalc.services.feasibility.reconciler", level="WARNING") as logs:
            self._reconcile(95, 10, 90, IMPOSSIBLE)
        self.assertTrue(any("DISAGREE" in line for line in logs.output))
