"""
Command-line entry points for forecasting.

Provides command-line interfaces for:
- Forecasting one symbol with one model, or comparing all models
- Parameter reference
"""
