"""
Shared value types for series generation, forecasting and evaluation.

This module consolidates the ForecastStrategy enum and the price, forecast
and metrics dataclasses that are passed between modules. All of them are
frozen: once built, a series or record is never mutated.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from datetime import date
from enum import Enum
from typing import Dict, Iterator, List, Tuple, Union, overload

import pandas as pd


class ForecastStrategy(Enum):
    """
    Closed set of forecasting strategies.

    Values are the model labels shown to users; the formulas behind them are
    simple heuristics, not trained models.
    """
    MOMENTUM = "LSTM"
    CONSERVATIVE = "RandomForest"
    LINEAR = "LinearRegression"
    ENSEMBLE = "Ensemble"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, text: Union[str, "ForecastStrategy"]) -> "ForecastStrategy":
        """
        Resolve a strategy from a member name or label (case-insensitive).

        Raises:
            ValueError: If text matches no strategy
        """
        if isinstance(text, cls):
            return text
        key = str(text).strip().lower()
        for member in cls:
            if key in (member.name.lower(), member.value.lower()):
                return member
        valid = [m.value for m in cls]
        raise ValueError(f"Unknown strategy '{text}'. Valid: {valid}")


_DISPLAY_NAMES = {
    ForecastStrategy.MOMENTUM: "LSTM Neural Network",
    ForecastStrategy.CONSERVATIVE: "Random Forest",
    ForecastStrategy.LINEAR: "Linear Regression",
    ForecastStrategy.ENSEMBLE: "Ensemble Model",
}


@dataclass(frozen=True)
class StockSymbol:
    """Catalogue entry for a tradable symbol."""
    symbol: str
    name: str
    sector: str


@dataclass(frozen=True)
class PricePoint:
    """
    One simulated trading day.

    low <= open, close <= high is intended but not enforced: high, low and
    close are perturbed independently around open.
    """
    date: date
    open: float
    high: float
    low: float
    close: float
    volume: int


@dataclass(frozen=True)
class HistoricalSeries:
    """Ordered daily OHLCV points for one symbol."""
    symbol: str
    points: Tuple[PricePoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> PricePoint: ...

    @overload
    def __getitem__(self, index: slice) -> "HistoricalSeries": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return HistoricalSeries(symbol=self.symbol, points=self.points[index])
        return self.points[index]

    @property
    def closes(self) -> List[float]:
        return [p.close for p in self.points]

    @property
    def last_close(self) -> float:
        return self.points[-1].close

    @property
    def last_date(self) -> date:
        return self.points[-1].date

    def daily_change_pct(self) -> float:
        """Percentage change between the last two closes (0.0 if fewer than two points)."""
        if len(self.points) < 2:
            return 0.0
        previous = self.points[-2].close
        return (self.points[-1].close - previous) / previous * 100

    def to_frame(self) -> pd.DataFrame:
        """
        Convert to a DataFrame with a DatetimeIndex named 'Date'.

        Returns:
            DataFrame with Open, High, Low, Close, Volume columns
        """
        index = pd.DatetimeIndex([pd.Timestamp(p.date) for p in self.points], name="Date")
        return pd.DataFrame(
            {
                "Open": [p.open for p in self.points],
                "High": [p.high for p in self.points],
                "Low": [p.low for p in self.points],
                "Close": [p.close for p in self.points],
                "Volume": [p.volume for p in self.points],
            },
            index=index,
        )


@dataclass(frozen=True)
class ForecastPoint:
    """Predicted price for one future day."""
    date: date
    predicted: float
    confidence: float  # In [0, 1], non-increasing along the horizon


@dataclass(frozen=True)
class ForecastSeries:
    """Forward forecast produced by exactly one strategy."""
    strategy: ForecastStrategy
    points: Tuple[ForecastPoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[ForecastPoint]:
        return iter(self.points)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ForecastSeries(strategy=self.strategy, points=self.points[index])
        return self.points[index]

    @property
    def predicted(self) -> List[float]:
        return [p.predicted for p in self.points]

    @property
    def confidences(self) -> List[float]:
        return [p.confidence for p in self.points]

    def average_confidence(self) -> float:
        if not self.points:
            return math.nan
        return sum(self.confidences) / len(self.points)

    def to_frame(self) -> pd.DataFrame:
        index = pd.DatetimeIndex([pd.Timestamp(p.date) for p in self.points], name="Date")
        return pd.DataFrame(
            {"Predicted": self.predicted, "Confidence": self.confidences},
            index=index,
        )


@dataclass(frozen=True)
class MetricsRecord:
    """
    Accuracy statistics for a reference/predicted pair.

    NaN marks a metric that is undefined for the inputs (too few points,
    constant reference series, zero reference prices).
    """
    rmse: float
    mae: float
    r2: float
    directional_accuracy: float
    mape: float  # Percent

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
