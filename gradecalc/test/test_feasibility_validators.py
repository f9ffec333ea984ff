from django.test import SimpleTestCase

from gradecalc.academic.grade_calculator import FeasibilityInput, GradedCategory
from gradecalc.services.feasibility import validators as vz
from gradecalc.services.shared.errors import ValidationError


def _payload(**overrides):
    data = {
        "categories": [
            {"name": "Homework", "weight": 20, "score": 95},
            {"name": "Midterm 1", "weight": 50, "score": 88},
        ],
        "finalExamWeight": 30,
        "desiredGrade": 90,
    }
    data.update(overrides)
    return data


class FeasibilityValidatorsUnitTests(SimpleTestCase):
    def test_build_input_ok(self):
        out = vz.build_feasibility_input(_payload())
        self.assertIsInstance(out, FeasibilityInput)
        self.assertEqual(len(out.categories), 2)
        self.assertEqual(out.categories[0], GradedCategory("Homework", 20.0, 95.0))
        self.assertEqual(out.final_weight, 30.0)
        self.assertEqual(out.desired_grade, 90.0)

    def test_snake_case_keys_and_numeric_strings(self):
        data = {
            "categories": [{"name": " Lab ", "weight": "70", "score": "81.5"}],
            "final_weight": "30",
            "desired_grade": 75,
        }
        out = vz.build_feasibility_input(data)
        self.assertEqual(out.categories[0].name, "Lab")
        self.assertEqual(out.categories[0].score, 81.5)
        self.assertEqual(out.final_weight, 30.0)

    def test_empty_categories_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            vz.build_feasibility_input(_payload(categories=[]))
        self.assertEqual(ctx.exception.error_code, "NO_CATEGORIES")

    def test_blank_name_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            vz.build_feasibility_input(_payload(categories=[{"name": "  ", "weight": 70, "score": 80}]))
        self.assertEqual(ctx.exception.error_code, "INVALID_NAME")
        self.assertEqual(ctx.exception.field, "categories[0].name")

    def test_out_of_range_score_rejected(self):
        cats = [{"name": "A", "weight": 20, "score": 95}, {"name": "B", "weight": 50, "score": 101}]
        with self.assertRaises(ValidationError) as ctx:
            vz.build_feasibility_input(_payload(categories=cats))
        self.assertEqual(ctx.exception.error_code, "OUT_OF_RANGE")
        self.assertEqual(ctx.exception.field, "categories[1].score")

    def test_negative_weight_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            vz.build_feasibility_input(_payload(finalExamWeight=-1))
        self.assertEqual(ctx.exception.error_code, "OUT_OF_RANGE")
        self.assertIn("Cannot be negative", ctx.exception.message)

    def test_huge_integer_is_out_of_range(self):
        cats = [{"name": "Homework", "weight": 10**400, "score": 90}]
        with self.assertRaises(ValidationError) as ctx:
            vz.build_feasibility_input(_payload(categories=cats))
        self.assertEqual(ctx.exception.error_code, "OUT_OF_RANGE")
        self.assertEqual(ctx.exception.field, "categories[0].weight")
        self.assertIn("Cannot be over 100", ctx.exception.message)

        with self.assertRaises(ValidationError) as ctx:
            vz.build_feasibility_input(_payload(desiredGrade=-(10**400)))
        self.assertEqual(ctx.exception.error_code, "OUT_OF_RANGE")
        self.assertIn("Cannot be negative", ctx.exception.message)

    def test_non_numeric_values_rejected(self):
        for bad in ["abc", "", None, True, float("nan"), float("inf"), [1]]:
            with self.subTest(value=bad):
                with self.assertRaises(ValidationError) as ctx:
                    vz.build_feasibility_input(_payload(desiredGrade=bad))
                self.assertEqual(ctx.exception.error_code, "INVALID_NUMBER")
                self.assertEqual(ctx.exception.field, "desiredGrade")

    def test_payload_must_be_object(self):
        with self.assertRaises(ValidationError) as ctx:
            vz.build_feasibility_input(["not", "a", "dict"])
        self.assertEqual(ctx.exception.error_code, "INVALID_PAYLOAD")

    def test_weight_sum_invalid_carries_observed_sum(self):
        data = vz.build_feasibility_input(
            _payload(categories=[{"name": "Homework", "weight": 20, "score": 95}, {"name": "Midterm 1", "weight": 25, "score": 88}])
        )
        with self.assertRaises(ValidationError) as ctx:
            vz.ensure_weights_sum_to_100(data)
        err = ctx.exception
        self.assertEqual(err.error_code, "WEIGHT_SUM_INVALID")
        self.assertAlmostEqual(err.observed_sum, 75.0, places=6)
        payload = err.as_payload()
        self.assertEqual(payload["observed_sum"], 75.0)
        self.assertIn("Current sum: 75.00%", payload["error"])

    def test_weight_sum_valid_returns_total(self):
        data = vz.build_feasibility_input(_payload())
        self.assertAlmostEqual(vz.ensure_weights_sum_to_100(data), 100.0, places=6)
