"""
Strategy dispatch table.

Each ForecastStrategy maps to one immutable StrategyParams entry holding its
trailing window, jitter span, confidence shape and one-step formula. There
is no registration: the set of strategies is closed.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from .trend import calculate_momentum, calculate_average_change, calculate_slope
from ..shared.defaults import MOMENTUM_WINDOW, TREND_WINDOW
from ..shared.types import ForecastStrategy


# (closes, current_price, last_price, step, noise) -> predicted price
StepFormula = Callable[[Sequence[float], float, float, int, float], float]


def _momentum_step(closes, current_price, last_price, step, noise):
    return current_price * (1 + calculate_momentum(closes, step) + noise)


def _conservative_step(closes, current_price, last_price, step, noise):
    return current_price * (1 + calculate_average_change(closes) + noise)


def _linear_step(closes, current_price, last_price, step, noise):
    return current_price + calculate_slope(closes) * step + noise


def ensemble_estimates(closes: Sequence[float], last_price: float, step: int) -> tuple:
    """
    The three single-step sub-estimates averaged by the ensemble.

    Each is computed from the fixed last historical price, never from a
    running forecast.
    """
    return (
        last_price * (1 + calculate_momentum(closes, step)),
        last_price * (1 + calculate_average_change(closes)),
        last_price + calculate_slope(closes) * step,
    )


def _ensemble_step(closes, current_price, last_price, step, noise):
    estimates = ensemble_estimates(closes, last_price, step)
    return sum(estimates) / len(estimates) + noise


@dataclass(frozen=True)
class StrategyParams:
    """Tuning constants and formula for one strategy."""
    window: int  # Trailing closes the formula reads
    jitter_span: float  # Noise is U(-0.5, 0.5) * jitter_span
    confidence_floor: float
    confidence_decay: float  # Confidence lost linearly across the full horizon
    formula: StepFormula
    uses_running_price: bool = True

    def confidence(self, step: int, horizon: int) -> float:
        return max(self.confidence_floor, 1 - (step / horizon) * self.confidence_decay)


STRATEGY_PARAMS: Mapping[ForecastStrategy, StrategyParams] = MappingProxyType({
    ForecastStrategy.MOMENTUM: StrategyParams(
        window=MOMENTUM_WINDOW,
        jitter_span=0.01,
        confidence_floor=0.6,
        confidence_decay=0.4,
        formula=_momentum_step,
    ),
    ForecastStrategy.CONSERVATIVE: StrategyParams(
        window=TREND_WINDOW,
        jitter_span=0.005,
        confidence_floor=0.7,
        confidence_decay=0.3,
        formula=_conservative_step,
    ),
    ForecastStrategy.LINEAR: StrategyParams(
        window=TREND_WINDOW,
        jitter_span=2.0,  # Absolute price units
        confidence_floor=0.5,
        confidence_decay=0.5,
        formula=_linear_step,
    ),
    ForecastStrategy.ENSEMBLE: StrategyParams(
        window=max(MOMENTUM_WINDOW, TREND_WINDOW),
        jitter_span=1.0,  # Absolute price units
        confidence_floor=0.8,
        confidence_decay=0.2,
        formula=_ensemble_step,
        uses_running_price=False,
    ),
})


def get_strategy_params(strategy) -> StrategyParams:
    """Look up params for a ForecastStrategy or any label ForecastStrategy.parse accepts."""
    return STRATEGY_PARAMS[ForecastStrategy.parse(strategy)]
