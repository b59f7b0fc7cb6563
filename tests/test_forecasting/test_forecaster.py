"""
Tests for the forward forecaster and its strategy dispatch table.
"""
from datetime import date, timedelta

import numpy as np
import pytest

from stockcast.data.generator import generate_series
from stockcast.forecasting.forecaster import Forecaster, predict
from stockcast.forecasting.strategies import STRATEGY_PARAMS, ensemble_estimates, get_strategy_params
from stockcast.forecasting.trend import calculate_momentum, calculate_average_change, calculate_slope
from stockcast.shared.types import ForecastStrategy, HistoricalSeries, PricePoint


FLOORS = {
    ForecastStrategy.MOMENTUM: 0.6,
    ForecastStrategy.CONSERVATIVE: 0.7,
    ForecastStrategy.LINEAR: 0.5,
    ForecastStrategy.ENSEMBLE: 0.8,
}


def _history(closes, start=date(2024, 1, 1)):
    """Hand-built history with the given closes."""
    points = tuple(
        PricePoint(
            date=start + timedelta(days=i),
            open=c, high=c + 1, low=c - 1, close=c, volume=1_000_000,
        )
        for i, c in enumerate(closes)
    )
    return HistoricalSeries(symbol="TEST", points=points)


@pytest.fixture
def history():
    return generate_series("TCS", 120, rng=np.random.default_rng(42), as_of=date(2024, 1, 1))


class TestStrategyParams:
    """Test the dispatch table."""

    def test_table_covers_every_strategy(self):
        assert set(STRATEGY_PARAMS) == set(ForecastStrategy)

    def test_floors_and_decays(self):
        for strategy, floor in FLOORS.items():
            params = STRATEGY_PARAMS[strategy]
            assert params.confidence_floor == floor
            # Confidence reaches its floor exactly at the end of the horizon
            assert 1 - params.confidence_decay == pytest.approx(floor)

    def test_windows(self):
        assert STRATEGY_PARAMS[ForecastStrategy.MOMENTUM].window == 10
        assert STRATEGY_PARAMS[ForecastStrategy.CONSERVATIVE].window == 20
        assert STRATEGY_PARAMS[ForecastStrategy.LINEAR].window == 20

    def test_only_ensemble_ignores_running_price(self):
        assert not STRATEGY_PARAMS[ForecastStrategy.ENSEMBLE].uses_running_price
        assert all(
            p.uses_running_price for s, p in STRATEGY_PARAMS.items() if s is not ForecastStrategy.ENSEMBLE
        )

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            STRATEGY_PARAMS[ForecastStrategy.LINEAR] = STRATEGY_PARAMS[ForecastStrategy.ENSEMBLE]

    def test_get_strategy_params_accepts_labels(self):
        assert get_strategy_params("RandomForest") is STRATEGY_PARAMS[ForecastStrategy.CONSERVATIVE]


class TestPredictShape:
    """Length, dates and confidence properties for every strategy."""

    @pytest.mark.parametrize("strategy", list(ForecastStrategy))
    @pytest.mark.parametrize("horizon", [1, 7, 30, 180])
    def test_length_and_dates(self, history, strategy, horizon):
        forecast = predict(history, strategy, horizon, rng=np.random.default_rng(0))
        assert len(forecast) == horizon
        assert forecast.strategy is strategy
        assert forecast[0].date == history.last_date + timedelta(days=1)
        dates = [p.date for p in forecast]
        assert all(b - a == timedelta(days=1) for a, b in zip(dates, dates[1:]))

    @pytest.mark.parametrize("strategy", list(ForecastStrategy))
    def test_confidence_bounded_and_non_increasing(self, history, strategy):
        forecast = predict(history, strategy, 60, rng=np.random.default_rng(0))
        confidences = forecast.confidences
        assert all(FLOORS[strategy] <= c <= 1.0 for c in confidences)
        assert all(b <= a for a, b in zip(confidences, confidences[1:]))
        assert confidences[-1] == FLOORS[strategy]

    def test_confidence_values(self, history):
        forecast = predict(history, ForecastStrategy.MOMENTUM, 10, rng=np.random.default_rng(0))
        # 1 - (i / 10) * 0.4
        assert forecast.confidences[:3] == [0.96, 0.92, 0.88]

    def test_rounding(self, history):
        forecast = predict(history, ForecastStrategy.LINEAR, 30, rng=np.random.default_rng(0))
        for p in forecast:
            assert round(p.predicted, 2) == p.predicted
            assert round(p.confidence, 3) == p.confidence

    @pytest.mark.parametrize("horizon", [0, -5])
    def test_non_positive_horizon_yields_empty(self, history, horizon):
        forecast = predict(history, ForecastStrategy.ENSEMBLE, horizon)
        assert len(forecast) == 0
        assert forecast.strategy is ForecastStrategy.ENSEMBLE

    def test_empty_history_raises(self):
        with pytest.raises(ValueError, match="history is empty"):
            predict(HistoricalSeries(symbol="NONE"), ForecastStrategy.LINEAR, 5)

    def test_unknown_strategy_raises(self, history):
        with pytest.raises(ValueError, match="Unknown strategy"):
            predict(history, "Prophet", 5)

    def test_accepts_labels(self, history):
        forecast = predict(history, "LSTM", 3, rng=np.random.default_rng(0))
        assert forecast.strategy is ForecastStrategy.MOMENTUM

    def test_same_seed_reproduces_forecast(self, history):
        a = predict(history, ForecastStrategy.ENSEMBLE, 30, rng=np.random.default_rng(9))
        b = predict(history, ForecastStrategy.ENSEMBLE, 30, rng=np.random.default_rng(9))
        assert a == b

    @pytest.mark.parametrize("strategy", list(ForecastStrategy))
    def test_single_point_history(self, strategy):
        forecast = predict(_history([100.0]), strategy, 5, rng=np.random.default_rng(0))
        assert len(forecast) == 5
        # No trend is measurable from one close; only jitter moves the price
        for p in forecast:
            assert 90.0 < p.predicted < 110.0


class TestPredictFormulas:
    """Replay each formula with the same random draws."""

    def test_momentum_compounds_running_price(self, history):
        draws = np.random.default_rng(3)
        closes = history.closes[-10:]
        current = history.last_close
        expected = []
        for step in range(1, 16):
            noise = (draws.random() - 0.5) * 0.01
            current = current * (1 + calculate_momentum(closes, step) + noise)
            expected.append(round(current, 2))

        forecast = predict(history, ForecastStrategy.MOMENTUM, 15, rng=np.random.default_rng(3))
        assert forecast.predicted == expected

    def test_conservative_compounds_average_change(self, history):
        draws = np.random.default_rng(3)
        change = calculate_average_change(history.closes[-20:])
        current = history.last_close
        expected = []
        for _ in range(15):
            current = current * (1 + change + (draws.random() - 0.5) * 0.005)
            expected.append(round(current, 2))

        forecast = predict(history, ForecastStrategy.CONSERVATIVE, 15, rng=np.random.default_rng(3))
        assert forecast.predicted == expected

    def test_linear_adds_scaled_slope_to_running_price(self):
        history = _history([100.0 + k for k in range(20)])  # slope = 1
        draws = np.random.default_rng(4)
        slope = calculate_slope(history.closes)
        current = history.last_close
        expected = []
        for step in range(1, 6):
            current = current + slope * step + (draws.random() - 0.5) * 2
            expected.append(round(current, 2))

        forecast = predict(history, ForecastStrategy.LINEAR, 5, rng=np.random.default_rng(4))
        assert forecast.predicted == pytest.approx(expected, abs=1e-9)
        # Cumulative: 119 + 1 + 2 + 3 + 4 + 5 = 134, jitter at most +/- 5
        assert 129.0 <= forecast.predicted[-1] <= 139.0

    def test_ensemble_averages_estimates_from_fixed_base(self, history):
        draws = np.random.default_rng(8)
        closes = history.closes[-20:]
        last = history.last_close
        expected = []
        for step in range(1, 31):
            noise = (draws.random() - 0.5) * 1.0
            estimates = ensemble_estimates(closes, last, step)
            assert estimates[0] == pytest.approx(last * (1 + calculate_momentum(closes, step)))
            assert estimates[1] == pytest.approx(last * (1 + calculate_average_change(closes)))
            assert estimates[2] == pytest.approx(last + calculate_slope(closes) * step)
            expected.append(round(sum(estimates) / 3 + noise, 2))

        forecast = predict(history, ForecastStrategy.ENSEMBLE, 30, rng=np.random.default_rng(8))
        assert forecast.predicted == pytest.approx(expected, abs=1e-9)

    def test_ensemble_does_not_recurse_on_flat_history(self):
        forecast = predict(_history([100.0] * 25), ForecastStrategy.ENSEMBLE, 50, rng=np.random.default_rng(1))
        # All trend terms are zero, so every step is 100 +/- 0.5 regardless of earlier steps
        for p in forecast:
            assert 99.5 <= p.predicted <= 100.5


class TestForecaster:
    """Test the Forecaster wrapper."""

    def test_predict_matches_function(self, history):
        forecaster = Forecaster(rng=np.random.default_rng(2))
        expected = predict(history, ForecastStrategy.LINEAR, 10, rng=np.random.default_rng(2))
        assert forecaster.predict(history, ForecastStrategy.LINEAR, 10) == expected
