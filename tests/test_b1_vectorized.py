"""
Unit tests for the vectorized annuity functions.

Every element of a *_vector result must equal the scalar function evaluated
on the broadcast element, bit for bit. Non-finite results must raise a
RuntimeWarning from the vectorized layer (the scalar layer stays silent).

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import unittest
import warnings

import numpy as np

from annuity_formulas.annuity import pmt, fv, ipmt, ppmt, cumipmt
from annuity_formulas.vectorized import (
    pmt_vector,
    fv_vector,
    ipmt_vector,
    ppmt_vector,
    cumipmt_vector,
    compare_arrays,
)


RATES = np.array([0.0, 0.005, 0.1, 0.3, 0.6])
PERIODS = np.arange(0, 38)


class TestVectorMatchesScalar(unittest.TestCase):

    def test_pmt_vector(self):
        result = pmt_vector(RATES, 36, 100_000, 1_000, True)
        self.assertEqual(result.shape, RATES.shape)
        self.assertEqual(result.dtype, np.float64)
        for i, rate in enumerate(RATES):
            with self.subTest(rate=rate):
                self.assertEqual(result[i], pmt(float(rate), 36, 100_000, 1_000, True))

    def test_pmt_vector_broadcasts(self):
        npers = np.array([[12], [36], [360]])
        result = pmt_vector(RATES, npers, 250_000)
        self.assertEqual(result.shape, (3, len(RATES)))
        for row, nper in enumerate(npers[:, 0]):
            for col, rate in enumerate(RATES):
                with self.subTest(nper=nper, rate=rate):
                    self.assertEqual(result[row, col], pmt(float(rate), int(nper), 250_000, 0))

    def test_fv_vector(self):
        result = fv_vector(RATES, 12, 10_000.0, 1_000, [False, True, False, True, False])
        for i, rate in enumerate(RATES):
            with self.subTest(rate=rate):
                self.assertEqual(result[i], fv(float(rate), 12, 10_000.0, 1_000, bool(i % 2)))

    def test_ipmt_vector_over_periods(self):
        for due in (False, True):
            result = ipmt_vector(0.1, PERIODS, 36, 800_000, 0, due)
            for per in PERIODS:
                with self.subTest(per=per, due=due):
                    self.assertEqual(result[per], ipmt(0.1, int(per), 36, 800_000, 0, due))

    def test_ppmt_vector_over_periods(self):
        result = ppmt_vector(0.1, PERIODS, 36, 800_000, 1_000, True)
        self.assertEqual(result[0], 0.0)
        self.assertEqual(result[37], 0.0)
        for per in PERIODS:
            with self.subTest(per=per):
                self.assertEqual(result[per], ppmt(0.1, int(per), 36, 800_000, 1_000, True))

    def test_cumipmt_vector(self):
        starts = np.array([1, 6, 1, 6, 10])
        ends = np.array([12, 12, 12, 12, 9])
        dues = np.array([False, False, True, True, False])
        result = cumipmt_vector(0.1, 36, 800_000, starts, ends, dues)
        np.testing.assert_array_equal(
            result,
            [-934_902.1923811939, -537_857.7282417413, -849_911.0839829034, -488_961.5711288557, 0.0],
        )
        for i in range(len(starts)):
            with self.subTest(i=i):
                self.assertEqual(
                    result[i],
                    cumipmt(0.1, 36, 800_000, int(starts[i]), int(ends[i]), bool(dues[i])),
                )

    def test_defaults_match_scalar(self):
        self.assertEqual(float(pmt_vector(0.3, 36, 100_000)), pmt(0.3, 36, 100_000))
        self.assertEqual(pmt(0.3, 36, 100_000), pmt(0.3, 36, 100_000, 0, False))
        self.assertEqual(float(fv_vector(0.1, 12, 10_000.0)), fv(0.1, 12, 10_000.0))
        self.assertEqual(fv(0.1, 12, 10_000.0), -213_842.83767210032)

    def test_scalar_inputs_give_zero_dim_array(self):
        result = pmt_vector(0.3, 36, 100_000, 0, True)
        self.assertEqual(result.shape, ())
        self.assertEqual(float(result), -23078.748029412483)

    def test_empty_input(self):
        result = ipmt_vector(0.1, np.array([], dtype=int), 36, 800_000)
        self.assertEqual(result.shape, (0,))


class TestNonFiniteWarnings(unittest.TestCase):

    def test_pmt_vector_warns_on_nan(self):
        with self.assertWarns(RuntimeWarning) as cm:
            result = pmt_vector([-1.0, 0.1], 36, 100_000, 0, True)
        self.assertTrue(np.isnan(result[0]))
        self.assertTrue(np.isfinite(result[1]))
        self.assertIn("pmt", str(cm.warning))
        self.assertIn("1 of 2", str(cm.warning))

    def test_ipmt_vector_warns_on_overflow(self):
        with self.assertWarns(RuntimeWarning):
            result = ipmt_vector(0.1, [2, 10_000], 36, 800_000)
        self.assertFalse(np.isfinite(result[1]))

    def test_finite_results_do_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            ppmt_vector(0.1, PERIODS, 36, 800_000)
            cumipmt_vector(0.1, 36, 800_000, 1, [1, 12, 36])

    def test_scalar_layer_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            pmt(-1.0, 36, 100_000, 0, True)
            ipmt(0.1, 10_000, 36, 800_000, 0, False)


class TestCompareArrays(unittest.TestCase):

    def test_identical(self):
        values = ipmt_vector(0.1, np.arange(1, 37), 36, 800_000)
        all_close, max_rel_diff, worst = compare_arrays(values, values.copy())
        self.assertTrue(all_close)
        self.assertEqual(max_rel_diff, 0.0)
        self.assertEqual(worst, 0)

    def test_reports_worst_index(self):
        expected = np.array([1.0, 2.0, 3.0, 4.0])
        actual = np.array([1.0, 2.0, 3.3, 4.0])
        all_close, max_rel_diff, worst = compare_arrays(expected, actual)
        self.assertFalse(all_close)
        self.assertAlmostEqual(max_rel_diff, 0.1, places=12)
        self.assertEqual(worst, 2)

    def test_truncates_to_shorter(self):
        all_close, _, _ = compare_arrays([1.0, 2.0, 3.0], [1.0, 2.0])
        self.assertTrue(all_close)


if __name__ == '__main__':
    unittest.main()
