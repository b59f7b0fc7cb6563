"""
Forecasting module.

Provides the four heuristic strategies behind one forecaster:
- Momentum ("LSTM"), Conservative ("RandomForest"), Linear, Ensemble
- Trailing-window trend statistics (momentum, average change, slope)
- Forecast summaries (next day / week / month)
"""
from .forecaster import Forecaster, predict
from .strategies import STRATEGY_PARAMS, StrategyParams, get_strategy_params, ensemble_estimates
from .summary import ForecastSummary, PriceChange, summarize_forecast
from .trend import calculate_momentum, calculate_average_change, calculate_slope

__all__ = [
    'Forecaster',
    'predict',
    'STRATEGY_PARAMS',
    'StrategyParams',
    'get_strategy_params',
    'ensemble_estimates',
    'ForecastSummary',
    'PriceChange',
    'summarize_forecast',
    'calculate_momentum',
    'calculate_average_change',
    'calculate_slope',
]
