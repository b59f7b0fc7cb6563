"""
Tests for trailing-window trend statistics.
"""
import math

import pytest

from stockcast.forecasting.trend import (
    calculate_momentum,
    calculate_average_change,
    calculate_slope,
)


class TestCalculateMomentum:
    """Test calculate_momentum."""

    def test_decays_with_step(self):
        closes = [100.0, 110.0]
        assert calculate_momentum(closes, 1) == pytest.approx(0.1 * math.exp(-0.1))
        assert calculate_momentum(closes, 10) == pytest.approx(0.1 * math.exp(-1.0))

    def test_uses_only_last_ten_closes(self):
        noisy_prefix = [50.0, 500.0, 5.0, 900.0]
        flat_tail = [100.0] * 10
        assert calculate_momentum(noisy_prefix + flat_tail, 1) == 0.0

    def test_full_window_averages_nine_returns(self):
        closes = [100.0 * 1.01 ** k for k in range(10)]
        assert calculate_momentum(closes, 0) == pytest.approx(0.01)

    @pytest.mark.parametrize("closes", [[], [100.0]])
    def test_too_short_returns_zero(self, closes):
        assert calculate_momentum(closes, 1) == 0.0

    def test_shorter_than_window_uses_available(self):
        assert calculate_momentum([100.0, 102.0, 104.04], 0) == pytest.approx(0.02)


class TestCalculateAverageChange:
    """Test calculate_average_change."""

    def test_mean_return(self):
        assert calculate_average_change([100.0, 110.0, 121.0]) == pytest.approx(0.1)

    def test_uses_only_last_twenty_closes(self):
        closes = [1.0, 1000.0] + [100.0] * 20
        assert calculate_average_change(closes) == 0.0

    @pytest.mark.parametrize("closes", [[], [100.0]])
    def test_too_short_returns_zero(self, closes):
        assert calculate_average_change(closes) == 0.0


class TestCalculateSlope:
    """Test calculate_slope."""

    def test_exact_line(self):
        assert calculate_slope([1.0, 3.0, 5.0, 7.0]) == pytest.approx(2.0)

    def test_two_points(self):
        assert calculate_slope([100.0, 95.0]) == pytest.approx(-5.0)

    def test_uses_only_last_twenty_closes(self):
        closes = [999.0, -999.0] + [float(k) for k in range(20)]
        assert calculate_slope(closes) == pytest.approx(1.0)

    def test_least_squares_fit(self):
        # y = [0, 2, 1]: slope = cov(x, y) / var(x) = 0.5
        assert calculate_slope([0.0, 2.0, 1.0]) == pytest.approx(0.5)

    @pytest.mark.parametrize("closes", [[], [100.0]])
    def test_too_short_returns_zero(self, closes):
        assert calculate_slope(closes) == 0.0
