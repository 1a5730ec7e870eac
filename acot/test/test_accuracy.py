import math
import unittest

import numpy as np

from .. import accuracy, fixtures, process, special
from ..constants import EPS


class TestFixtureAccuracy(unittest.TestCase):
    def _assert_within_tolerance(self, magnitude, sign):
        fixture = fixtures.load_group(magnitude, sign)
        self.assertGreater(len(fixture), 0)
        for (x, expected) in fixture:
            y = special.acot(x)
            if y == expected:
                continue
            delta = abs(y - expected)
            tol = 1.0 * EPS * abs(expected)
            self.assertTrue(
                delta <= tol,
                f"within tolerance. x: {x}. y: {y}. E: {expected}. "
                f"tol: {tol}. Δ: {delta}.",
            )

    def test_medium_positive(self):
        self._assert_within_tolerance("medium", "positive")

    def test_medium_negative(self):
        self._assert_within_tolerance("medium", "negative")

    def test_large_positive(self):
        self._assert_within_tolerance("large", "positive")

    def test_large_negative(self):
        self._assert_within_tolerance("large", "negative")

    def test_larger_positive(self):
        self._assert_within_tolerance("larger", "positive")

    def test_larger_negative(self):
        self._assert_within_tolerance("larger", "negative")

    def test_huge_positive(self):
        self._assert_within_tolerance("huge", "positive")

    def test_huge_negative(self):
        self._assert_within_tolerance("huge", "negative")

    def test_no_deviations_in_any_group(self):
        for fixture in fixtures.iter_groups():
            self.assertEqual(accuracy.deviations(special.acot, fixture), [])


class TestTolerance(unittest.TestCase):
    def test_tolerance(self):
        self.assertEqual(accuracy.tolerance(1.0), EPS)
        self.assertEqual(accuracy.tolerance(-2.0), 2.0 * EPS)
        self.assertEqual(accuracy.tolerance(1.0, multiplier=0.5), 0.5 * EPS)
        self.assertEqual(accuracy.tolerance(0.0), 0.0)

    def test_tolerance_uses_process_multiplier(self):
        previous = process.tolerance_multiplier
        process.tolerance_multiplier = 4.0
        try:
            self.assertEqual(accuracy.tolerance(1.0), 4.0 * EPS)
        finally:
            process.tolerance_multiplier = previous

    def test_within_tolerance(self):
        one_up = math.nextafter(1.0, 2.0)
        two_up = math.nextafter(one_up, 2.0)
        self.assertTrue(accuracy.within_tolerance(1.0, 1.0))
        self.assertTrue(accuracy.within_tolerance(one_up, 1.0))
        self.assertFalse(accuracy.within_tolerance(two_up, 1.0))
        self.assertTrue(accuracy.within_tolerance(two_up, 1.0, multiplier=2.0))
        self.assertTrue(accuracy.within_tolerance(math.inf, math.inf))
        self.assertFalse(accuracy.within_tolerance(math.nan, 1.0))


class TestDeviations(unittest.TestCase):
    def test_reports_points_outside_tolerance(self):
        fixture = fixtures.Fixture(
            name="synthetic",
            x=np.array([1.0, 2.0, 4.0]),
            expected=np.array([1.0, 2.0, 4.0]),
        )

        def off_at_two(x):
            return x + 1e-9 if x == 2.0 else x

        found = accuracy.deviations(off_at_two, fixture)
        self.assertEqual(len(found), 1)
        self.assertEqual(found[0].x, 2.0)
        self.assertEqual(found[0].expected, 2.0)
        self.assertAlmostEqual(found[0].delta, 1e-9)
        self.assertEqual(found[0].tolerance, 2.0 * EPS)
        self.assertIn("x: 2.0.", str(found[0]))

    def test_nan_result_is_a_deviation(self):
        fixture = fixtures.Fixture(
            name="synthetic", x=np.array([1.0]), expected=np.array([0.5])
        )
        found = accuracy.deviations(lambda x: math.nan, fixture)
        self.assertEqual(len(found), 1)
        self.assertTrue(math.isnan(found[0].y))
