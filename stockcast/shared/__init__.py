"""
Shared types and defaults for the forecasting system.

This module provides:
- ForecastStrategy enum
- Price, forecast and metrics value types
- Centralized default values for generation, forecasting and validation
"""
from .types import (
    ForecastStrategy,
    StockSymbol,
    PricePoint,
    HistoricalSeries,
    ForecastPoint,
    ForecastSeries,
    MetricsRecord,
)
from .defaults import (
    DEFAULT_DAYS, DEFAULT_BASE_PRICE,
    DEFAULT_HORIZON, MIN_HORIZON, MAX_HORIZON,
    DEFAULT_VALIDATION_WINDOW,
)

__all__ = [
    'ForecastStrategy',
    'StockSymbol',
    'PricePoint',
    'HistoricalSeries',
    'ForecastPoint',
    'ForecastSeries',
    'MetricsRecord',
    'DEFAULT_DAYS', 'DEFAULT_BASE_PRICE',
    'DEFAULT_HORIZON', 'MIN_HORIZON', 'MAX_HORIZON',
    'DEFAULT_VALIDATION_WINDOW',
]
