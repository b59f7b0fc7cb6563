"""
Forecast summary: next-day, week and month changes against the current price.
"""
from dataclasses import dataclass

from ..shared.defaults import (
    SUMMARY_NEXT_DAY_STEP, SUMMARY_WEEK_STEP, SUMMARY_MONTH_STEP,
    MAGNITUDE_HIGH_PCT, MAGNITUDE_MEDIUM_PCT,
)
from ..shared.types import ForecastSeries


@dataclass(frozen=True)
class PriceChange:
    """Predicted move relative to the current price."""
    predicted: float
    percentage: float

    @property
    def direction(self) -> str:
        return "up" if self.percentage >= 0 else "down"


@dataclass(frozen=True)
class ForecastSummary:
    """Headline numbers for a forecast."""
    next_day: PriceChange
    week: PriceChange
    month: PriceChange
    average_confidence: float

    @property
    def magnitude(self) -> str:
        """Size of the month move: High (>10%), Medium (>5%) or Low."""
        size = abs(self.month.percentage)
        if size > MAGNITUDE_HIGH_PCT:
            return "High"
        if size > MAGNITUDE_MEDIUM_PCT:
            return "Medium"
        return "Low"


def _change_at(forecast: ForecastSeries, step: int, current_price: float) -> PriceChange:
    # Short horizons fall back to the last available step
    point = forecast[step - 1] if step <= len(forecast) else forecast[-1]
    percentage = (point.predicted - current_price) / current_price * 100
    return PriceChange(predicted=point.predicted, percentage=percentage)


def summarize_forecast(forecast: ForecastSeries, current_price: float) -> ForecastSummary:
    """
    Summarize a forecast against the latest observed price.

    Args:
        forecast: Non-empty forecast
        current_price: Last observed close

    Returns:
        ForecastSummary with next-day, week (step 7) and month (step 30) changes

    Raises:
        ValueError: If forecast is empty
    """
    if len(forecast) == 0:
        raise ValueError("Cannot summarize an empty forecast")
    return ForecastSummary(
        next_day=_change_at(forecast, SUMMARY_NEXT_DAY_STEP, current_price),
        week=_change_at(forecast, SUMMARY_WEEK_STEP, current_price),
        month=_change_at(forecast, SUMMARY_MONTH_STEP, current_price),
        average_confidence=forecast.average_confidence(),
    )
