"""
Forward forecaster.

Rolls a strategy's one-step formula over the horizon. Momentum, Conservative
and Linear feed each prediction back in as the next step's running price;
Ensemble recomputes every step from the last historical close.
"""
import logging
from datetime import timedelta
from typing import Optional, Union

import numpy as np

from .strategies import STRATEGY_PARAMS
from ..shared.defaults import PRICE_DECIMALS, CONFIDENCE_DECIMALS
from ..shared.types import ForecastPoint, ForecastSeries, ForecastStrategy, HistoricalSeries

logger = logging.getLogger(__name__)


def predict(
    history: HistoricalSeries,
    strategy: Union[ForecastStrategy, str],
    horizon: int,
    rng: Optional[np.random.Generator] = None,
) -> ForecastSeries:
    """
    Forecast `horizon` days past the end of `history`.

    Args:
        history: Non-empty historical series
        strategy: ForecastStrategy or a label/name it can parse (e.g. "LSTM")
        horizon: Number of future days. Non-positive values yield an empty forecast.
        rng: Random source for the jitter term. If None, an unseeded generator is used.

    Returns:
        ForecastSeries with one point per day, dated from the day after the last close

    Raises:
        ValueError: If history is empty or strategy is unknown
    """
    strategy = ForecastStrategy.parse(strategy)
    if len(history) == 0:
        raise ValueError(f"Cannot forecast {history.symbol!r}: history is empty")
    if horizon <= 0:
        return ForecastSeries(strategy=strategy)

    rng = rng if rng is not None else np.random.default_rng()
    params = STRATEGY_PARAMS[strategy]
    closes = history.closes[-params.window:]
    last_price = history.last_close
    last_date = history.last_date

    current_price = last_price
    points = []
    for step in range(1, horizon + 1):
        noise = (rng.random() - 0.5) * params.jitter_span
        prediction = params.formula(closes, current_price, last_price, step, noise)
        if params.uses_running_price:
            current_price = prediction

        points.append(ForecastPoint(
            date=last_date + timedelta(days=step),
            predicted=round(prediction, PRICE_DECIMALS),
            confidence=round(params.confidence(step, horizon), CONFIDENCE_DECIMALS),
        ))

    logger.debug(
        f"{strategy.value} forecast for {history.symbol}: {horizon} days from {last_price} "
        f"to {points[-1].predicted}"
    )
    return ForecastSeries(strategy=strategy, points=tuple(points))


class Forecaster:
    """Produces forecasts with a shared random source."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def predict(
        self,
        history: HistoricalSeries,
        strategy: Union[ForecastStrategy, str],
        horizon: int,
    ) -> ForecastSeries:
        return predict(history, strategy, horizon, rng=self.rng)
