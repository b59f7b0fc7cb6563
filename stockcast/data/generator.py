"""
Synthetic OHLCV series generator.

Walks a price forward one calendar day at a time from a per-symbol base
price, combining a slow sinusoidal trend with uniform noise. High, low and
close are drawn independently around each day's open, so the OHLC ordering
is intentionally loose.
"""
import logging
import math
from datetime import date, timedelta
from typing import Optional

import numpy as np

from .symbols import get_base_price
from ..shared.defaults import (
    VOLATILITY, TREND_PERIOD, TREND_AMPLITUDE, OHLC_VARIATION,
    VOLUME_MIN, VOLUME_MAX, PRICE_DECIMALS,
)
from ..shared.types import HistoricalSeries, PricePoint

logger = logging.getLogger(__name__)


def generate_series(
    symbol: str,
    days: int,
    rng: Optional[np.random.Generator] = None,
    as_of: Optional[date] = None,
) -> HistoricalSeries:
    """
    Generate a synthetic daily history for a symbol.

    Args:
        symbol: Symbol to simulate; selects the base price (fallback for unknown symbols)
        days: Number of daily points. Non-positive values yield an empty series.
        rng: Random source. If None, an unseeded generator is used.
        as_of: Reference "today"; the first point is dated as_of - days.

    Returns:
        HistoricalSeries with exactly max(days, 0) points
    """
    if days <= 0:
        return HistoricalSeries(symbol=symbol)

    rng = rng if rng is not None else np.random.default_rng()
    start_date = (as_of or date.today()) - timedelta(days=days)
    current_price = get_base_price(symbol)

    points = []
    for i in range(days):
        trend = math.sin(i / TREND_PERIOD) * TREND_AMPLITUDE
        random_change = (rng.random() - 0.5) * VOLATILITY
        current_price *= 1 + trend + random_change

        open_ = current_price
        variation = open_ * OHLC_VARIATION
        high = open_ + rng.random() * variation
        low = open_ - rng.random() * variation
        close = low + rng.random() * (high - low)
        current_price = close

        points.append(PricePoint(
            date=start_date + timedelta(days=i),
            open=round(open_, PRICE_DECIMALS),
            high=round(high, PRICE_DECIMALS),
            low=round(low, PRICE_DECIMALS),
            close=round(close, PRICE_DECIMALS),
            volume=int(rng.integers(VOLUME_MIN, VOLUME_MAX)),
        ))

    logger.debug(
        f"Generated {days} days for {symbol}: "
        f"{points[0].date} to {points[-1].date}, last close {points[-1].close}"
    )
    return HistoricalSeries(symbol=symbol, points=tuple(points))


class SeriesGenerator:
    """
    Generates synthetic histories with a shared random source.

    Pass a seeded numpy Generator for reproducible series.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, as_of: Optional[date] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.as_of = as_of

    def generate(self, symbol: str, days: int) -> HistoricalSeries:
        return generate_series(symbol, days, rng=self.rng, as_of=self.as_of)
