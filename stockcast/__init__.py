"""
Synthetic stock forecasting core.

Provides unified interfaces for:
- Synthetic OHLCV series generation (any symbol, any length)
- Forward forecasts from four heuristic model strategies
- Accuracy metrics and hold-out validation of forecasts
- Side-by-side strategy comparison
"""
