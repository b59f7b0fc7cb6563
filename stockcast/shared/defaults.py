"""
Centralized default values for generation, forecasting and validation.

This is the SINGLE SOURCE OF TRUTH for all tuning constants.
All modules should import from here to ensure consistency.

Per-strategy forecast constants (window, jitter, confidence floor/decay)
live in the strategy dispatch table in stockcast.forecasting.strategies.
"""

# Series generation defaults
DEFAULT_DAYS = 252  # One trading year
DEFAULT_BASE_PRICE = 1000.0  # Used for symbols missing from the catalogue
VOLATILITY = 0.02  # Daily random change spans +/- VOLATILITY / 2
TREND_PERIOD = 20  # Days per radian of the sinusoidal trend
TREND_AMPLITUDE = 0.001
OHLC_VARIATION = 0.03  # Max intraday swing as a fraction of open
VOLUME_MIN = 1_000_000  # Inclusive
VOLUME_MAX = 11_000_000  # Exclusive
PRICE_DECIMALS = 2

# Forecast defaults
DEFAULT_HORIZON = 30
MIN_HORIZON = 1
MAX_HORIZON = 180  # Longest horizon offered to users
CONFIDENCE_DECIMALS = 3
MOMENTUM_WINDOW = 10
TREND_WINDOW = 20
MOMENTUM_DECAY_RATE = 0.1  # exp(-rate * step)

# Validation defaults
# The model is replayed over history[-2w:-w] and scored on the last w closes
DEFAULT_VALIDATION_WINDOW = 30
RATIO_DECIMALS = 3  # r2 and directional accuracy

# Forecast summary checkpoints (1-based step index)
SUMMARY_NEXT_DAY_STEP = 1
SUMMARY_WEEK_STEP = 7
SUMMARY_MONTH_STEP = 30
MAGNITUDE_HIGH_PCT = 10.0
MAGNITUDE_MEDIUM_PCT = 5.0
