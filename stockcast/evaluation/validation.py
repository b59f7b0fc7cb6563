"""
Hold-out validation and strategy comparison.

A strategy is validated by replaying it over history[-2w:-w] for w days and
scoring the result against the last w observed closes. run_model pairs that
score with a production forecast from the full history; compare_strategies
does the same for every strategy on one history.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
import pandas as pd

from .metrics import evaluate
from ..forecasting.forecaster import predict
from ..shared.defaults import DEFAULT_VALIDATION_WINDOW
from ..shared.types import ForecastSeries, ForecastStrategy, HistoricalSeries, MetricsRecord

logger = logging.getLogger(__name__)


COMPARISON_COLUMNS = [
    "strategy",
    "label",
    "rmse",
    "mae",
    "r2",
    "directional_accuracy",
    "mape",
    "average_confidence",
    "final_prediction",
]


@dataclass(frozen=True)
class ModelRun:
    """Production forecast plus its hold-out validation metrics."""
    strategy: ForecastStrategy
    forecast: ForecastSeries
    metrics: MetricsRecord


def validate_strategy(
    history: HistoricalSeries,
    strategy: Union[ForecastStrategy, str],
    window: int = DEFAULT_VALIDATION_WINDOW,
    rng: Optional[np.random.Generator] = None,
) -> MetricsRecord:
    """
    Score a strategy on the most recent `window` days of history.

    Args:
        history: Historical series with at least 2 * window points
        strategy: Strategy to validate
        window: Hold-out length in days
        rng: Random source for the forecast jitter

    Returns:
        MetricsRecord of observed closes vs. validation predictions

    Raises:
        ValueError: If window is not positive or history is too short
    """
    if window <= 0:
        raise ValueError(f"validation window must be > 0, got {window}")
    required = 2 * window
    if len(history) < required:
        raise ValueError(
            f"History for {history.symbol!r} has {len(history)} points; "
            f"validation window {window} needs at least {required}"
        )

    observed = history.closes[-window:]
    replay = predict(history[-2 * window:-window], strategy, window, rng=rng)
    return evaluate(observed, replay.predicted)


def run_model(
    history: HistoricalSeries,
    strategy: Union[ForecastStrategy, str],
    horizon: int,
    validation_window: int = DEFAULT_VALIDATION_WINDOW,
    rng: Optional[np.random.Generator] = None,
) -> ModelRun:
    """
    Forecast from the full history and validate the strategy on a hold-out window.

    Args:
        history: Historical series (see validate_strategy for the length requirement)
        strategy: Strategy to run
        horizon: Production forecast length in days
        validation_window: Hold-out length in days
        rng: Shared random source for both forecasts

    Returns:
        ModelRun with the production forecast and validation metrics
    """
    strategy = ForecastStrategy.parse(strategy)
    rng = rng if rng is not None else np.random.default_rng()

    forecast = predict(history, strategy, horizon, rng=rng)
    metrics = validate_strategy(history, strategy, window=validation_window, rng=rng)

    logger.info(
        f"{strategy.display_name} on {history.symbol}: horizon={horizon}, "
        f"RMSE={metrics.rmse}, R2={metrics.r2}, "
        f"directional={metrics.directional_accuracy}, MAPE={metrics.mape}%"
    )
    return ModelRun(strategy=strategy, forecast=forecast, metrics=metrics)


def compare_strategies(
    history: HistoricalSeries,
    horizon: int,
    validation_window: int = DEFAULT_VALIDATION_WINDOW,
    rng: Optional[np.random.Generator] = None,
) -> pd.DataFrame:
    """
    Run every strategy on the same history.

    Returns:
        DataFrame with COMPARISON_COLUMNS, one row per strategy, sorted by RMSE (best first)
    """
    rng = rng if rng is not None else np.random.default_rng()

    rows = []
    for strategy in ForecastStrategy:
        run = run_model(history, strategy, horizon, validation_window=validation_window, rng=rng)
        final_prediction = run.forecast[-1].predicted if len(run.forecast) else None
        rows.append({
            "strategy": strategy.value,
            "label": strategy.display_name,
            **run.metrics.to_dict(),
            "average_confidence": run.forecast.average_confidence(),
            "final_prediction": final_prediction,
        })

    df = pd.DataFrame(rows, columns=COMPARISON_COLUMNS)
    df = df.sort_values("rmse", kind="stable").reset_index(drop=True)
    logger.info(f"Compared {len(df)} strategies on {history.symbol}; best by RMSE: {df['strategy'].iloc[0]}")
    return df
