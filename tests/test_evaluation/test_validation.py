"""
Tests for hold-out validation and strategy comparison.
"""
import logging
from datetime import date

import numpy as np
import pytest

from stockcast.data.generator import generate_series
from stockcast.evaluation.metrics import evaluate
from stockcast.evaluation.validation import (
    COMPARISON_COLUMNS,
    ModelRun,
    compare_strategies,
    run_model,
    validate_strategy,
)
from stockcast.forecasting.forecaster import predict
from stockcast.shared.types import ForecastStrategy


@pytest.fixture
def history():
    return generate_series("INFY", 252, rng=np.random.default_rng(21), as_of=date(2024, 3, 1))


class TestValidateStrategy:
    """Test validate_strategy."""

    @pytest.mark.parametrize("strategy", list(ForecastStrategy))
    def test_scores_replay_against_last_window(self, history, strategy):
        replay = predict(history[-60:-30], strategy, 30, rng=np.random.default_rng(4))
        expected = evaluate(history.closes[-30:], replay.predicted)
        assert validate_strategy(history, strategy, window=30, rng=np.random.default_rng(4)) == expected

    def test_metrics_are_sane(self, history):
        metrics = validate_strategy(history, ForecastStrategy.ENSEMBLE, rng=np.random.default_rng(4))
        assert metrics.rmse >= 0
        assert metrics.mae >= 0
        assert metrics.mae <= metrics.rmse
        assert metrics.r2 <= 1
        assert 0 <= metrics.directional_accuracy <= 1
        assert metrics.mape >= 0

    def test_minimum_history(self, history):
        validate_strategy(history[-20:], ForecastStrategy.LINEAR, window=10)
        with pytest.raises(ValueError, match="needs at least 20"):
            validate_strategy(history[-19:], ForecastStrategy.LINEAR, window=10)

    def test_window_must_be_positive(self, history):
        with pytest.raises(ValueError, match="window must be > 0"):
            validate_strategy(history, ForecastStrategy.LINEAR, window=0)


class TestRunModel:
    """Test run_model."""

    def test_returns_forecast_and_metrics(self, history):
        run = run_model(history, "RandomForest", 45, rng=np.random.default_rng(0))
        assert isinstance(run, ModelRun)
        assert run.strategy is ForecastStrategy.CONSERVATIVE
        assert len(run.forecast) == 45
        assert run.forecast[0].date == date(2024, 3, 1)

    def test_production_forecast_drawn_first(self, history):
        run = run_model(history, ForecastStrategy.MOMENTUM, 10, rng=np.random.default_rng(6))
        assert run.forecast == predict(history, ForecastStrategy.MOMENTUM, 10, rng=np.random.default_rng(6))

    def test_logs_metrics(self, history, caplog):
        with caplog.at_level(logging.INFO, logger="stockcast.evaluation.validation"):
            run_model(history, ForecastStrategy.LINEAR, 5, rng=np.random.default_rng(0))
        assert "Linear Regression on INFY" in caplog.text
        assert "RMSE=" in caplog.text


class TestCompareStrategies:
    """Test compare_strategies."""

    def test_one_row_per_strategy_sorted_by_rmse(self, history):
        df = compare_strategies(history, 30, rng=np.random.default_rng(0))
        assert list(df.columns) == COMPARISON_COLUMNS
        assert len(df) == 4
        assert set(df["strategy"]) == {s.value for s in ForecastStrategy}
        assert df["rmse"].is_monotonic_increasing
        assert list(df.index) == [0, 1, 2, 3]

    def test_rows_match_individual_runs(self, history):
        df = compare_strategies(history, 30, rng=np.random.default_rng(0)).set_index("strategy")
        assert df.loc["Ensemble", "label"] == "Ensemble Model"
        assert 0.8 <= df.loc["Ensemble", "average_confidence"] <= 1.0
        assert df["final_prediction"].notna().all()

    def test_short_history_raises(self, history):
        with pytest.raises(ValueError):
            compare_strategies(history[-40:], 30)
