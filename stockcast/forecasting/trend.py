"""
Trailing-window trend statistics over closing prices.

All helpers tolerate histories shorter than their window: they use what is
available and return 0.0 when fewer than two closes exist.
"""
import math
from typing import Sequence

import numpy as np

from ..shared.defaults import MOMENTUM_WINDOW, TREND_WINDOW, MOMENTUM_DECAY_RATE


def _trailing_returns(closes: Sequence[float], window: int) -> np.ndarray:
    recent = np.asarray(closes[-window:], dtype=float)
    if len(recent) < 2:
        return np.empty(0)
    return np.diff(recent) / recent[:-1]


def calculate_momentum(
    closes: Sequence[float],
    step: int,
    window: int = MOMENTUM_WINDOW,
    decay_rate: float = MOMENTUM_DECAY_RATE,
) -> float:
    """
    Mean daily return over the trailing window, decayed by exp(-decay_rate * step).

    Args:
        closes: Historical closing prices, oldest first
        step: 1-based forecast step; later steps feel less momentum
        window: Number of trailing closes to use
        decay_rate: Exponential decay per step

    Returns:
        Fractional return to apply at this step
    """
    returns = _trailing_returns(closes, window)
    if returns.size == 0:
        return 0.0
    return float(returns.mean()) * math.exp(-step * decay_rate)


def calculate_average_change(closes: Sequence[float], window: int = TREND_WINDOW) -> float:
    """Mean daily fractional return over the trailing window (no decay)."""
    returns = _trailing_returns(closes, window)
    if returns.size == 0:
        return 0.0
    return float(returns.mean())


def calculate_slope(closes: Sequence[float], window: int = TREND_WINDOW) -> float:
    """Ordinary least-squares slope of close vs. index over the trailing window (price per day)."""
    recent = np.asarray(closes[-window:], dtype=float)
    if len(recent) < 2:
        return 0.0
    slope, _intercept = np.polyfit(np.arange(len(recent)), recent, 1)
    return float(slope)
