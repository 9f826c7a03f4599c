"""Tests for circular mean of wind directions."""

import math

import numpy as np
import pytest

pytestmark = pytest.mark.unit

from vpflowviz.vp.circular import CircularAccumulator, circular_mean


def _angular_distance(a, b):
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


class TestCircularMean:

    def test_wraps_around_north(self):
        result = circular_mean([350.0, 10.0])

        assert 0.0 <= result < 360.0
        assert _angular_distance(result, 0.0) < 1e-9

    def test_single_direction(self):
        assert circular_mean([90.0]) == pytest.approx(90.0)

    def test_nearby_directions(self):
        assert circular_mean([270.0, 280.0]) == pytest.approx(275.0)

    def test_result_normalized_to_positive_range(self):
        assert circular_mean([-90.0]) == pytest.approx(270.0)
        assert circular_mean([450.0]) == pytest.approx(90.0)

    def test_undefined_values_are_ignored(self):
        assert circular_mean([np.nan, 45.0, np.nan]) == pytest.approx(45.0)

    def test_no_defined_values_is_undefined(self):
        assert math.isnan(circular_mean([]))
        assert math.isnan(circular_mean([np.nan, np.nan]))

    def test_opposite_directions_are_undefined(self):
        assert math.isnan(circular_mean([0.0, 180.0]))
        assert math.isnan(circular_mean([0.0, 90.0, 180.0, 270.0]))

    def test_differs_from_arithmetic_mean(self):
        angles = [340.0, 20.0, 10.0]

        assert _angular_distance(circular_mean(angles), 3.47) < 0.01
        assert np.mean(angles) == pytest.approx(123.3333333)


class TestCircularAccumulator:

    def test_resultant_length(self):
        acc = CircularAccumulator()
        for d in (10.0, 10.0):
            acc.add(d)

        assert acc.resultant_length() == pytest.approx(1.0)
        assert acc.count == 2

    def test_none_is_ignored(self):
        acc = CircularAccumulator()
        acc.add(None)

        assert acc.count == 0
        assert math.isnan(acc.mean())
        assert math.isnan(acc.resultant_length())
