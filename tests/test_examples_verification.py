"""
Verification of every library function against the reference scenarios.

Each AnnuityExample in ANNUITY_EXAMPLES is evaluated through both the scalar
and the vectorized layer and compared exactly to its published value.

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import unittest

from annuity_formulas import vectorized
from annuity_formulas.examples import (
    ANNUITY_EXAMPLES,
    EXAMPLES_BY_FUNCTION,
    EXAMPLES_BY_ID,
    FUNCTIONS,
    AnnuityExample,
)


class TestExampleRegistry(unittest.TestCase):

    def test_ids_are_unique(self):
        ids = [ex.id for ex in ANNUITY_EXAMPLES]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(len(EXAMPLES_BY_ID), len(ANNUITY_EXAMPLES))

    def test_every_function_has_examples(self):
        for name in FUNCTIONS:
            with self.subTest(function=name):
                self.assertGreater(len(EXAMPLES_BY_FUNCTION[name]), 0)

    def test_every_function_covers_both_timings(self):
        for name, examples in EXAMPLES_BY_FUNCTION.items():
            with self.subTest(function=name):
                self.assertEqual({ex.due for ex in examples}, {False, True})

    def test_ids_carry_function_name(self):
        for ex in ANNUITY_EXAMPLES:
            with self.subTest(id=ex.id):
                self.assertTrue(ex.id.startswith(ex.function.upper() + "-"))


class TestExamplesScalar(unittest.TestCase):

    def test_all_examples(self):
        for ex in ANNUITY_EXAMPLES:
            with self.subTest(id=ex.id, kwargs=ex.kwargs):
                self.assertEqual(ex.evaluate(), ex.expected)

    def test_headline_scenarios(self):
        headline = {
            "PMT-R000": -2777.777777777778,
            "PMT-R030-DUE": -23078.748029412483,
            "FV-R010-PV-DUE": -238365.54981603133,
            "IPMT-R010": -79732.55489453014,
            "PPMT-R010-DUE": -6936.837258031126,
            "CUMIPMT-1-12": -934902.1923811939,
        }
        for example_id, expected in headline.items():
            with self.subTest(id=example_id):
                self.assertEqual(EXAMPLES_BY_ID[example_id].evaluate(), expected)

    def test_evaluate_unknown_function(self):
        ex = AnnuityExample(id="NPV-1", description="", function="npv")
        with self.assertRaises(KeyError):
            ex.evaluate()


class TestExamplesVectorized(unittest.TestCase):

    def test_all_examples(self):
        for ex in ANNUITY_EXAMPLES:
            func = getattr(vectorized, f"{ex.function}_vector")
            with self.subTest(id=ex.id):
                self.assertEqual(float(func(**ex.kwargs)), ex.expected)


if __name__ == '__main__':
    unittest.main()
