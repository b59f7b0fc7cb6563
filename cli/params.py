#!/usr/bin/env python3
"""
Parameter reference CLI.

Shows all configurable parameters, their valid ranges, and defaults.
"""
import sys

from stockcast.config import PRESET_CONFIGS
from stockcast.data.symbols import STOCK_SYMBOLS, get_base_price
from stockcast.forecasting.strategies import STRATEGY_PARAMS
from stockcast.shared.defaults import (
    DEFAULT_DAYS, DEFAULT_BASE_PRICE,
    DEFAULT_HORIZON, MIN_HORIZON, MAX_HORIZON,
    DEFAULT_VALIDATION_WINDOW,
    VOLATILITY, TREND_PERIOD, TREND_AMPLITUDE, OHLC_VARIATION,
)


def main():
    """Print all configurable parameters with their ranges and defaults."""

    print("=" * 80)
    print("FORECASTING PARAMETER REFERENCE")
    print("=" * 80)
    print()

    # Data generation
    print("SYNTHETIC DATA:")
    print("-" * 80)
    print()
    print("  --symbol            Symbol to simulate (default: RELIANCE)")
    print(f"                      Unknown symbols start at {DEFAULT_BASE_PRICE:,.0f}")
    print(f"  --days              History length: {DEFAULT_DAYS} (default)")
    print("                      Must be >= 2 x validation window")
    print()
    print(f"  Daily volatility:   {VOLATILITY} (random change spans +/- {VOLATILITY / 2})")
    print(f"  Trend:              sin(day / {TREND_PERIOD}) x {TREND_AMPLITUDE}")
    print(f"  Intraday range:     up to {OHLC_VARIATION:.0%} of open")
    print()

    print("  Symbols:")
    for entry in STOCK_SYMBOLS:
        print(f"    {entry.symbol:<12} {get_base_price(entry.symbol):>10,.0f}  {entry.name} ({entry.sector})")
    print()

    # Models
    print("MODELS:")
    print("-" * 80)
    print()
    print(f"  --model             Options: {', '.join(s.value for s in STRATEGY_PARAMS)}")
    print()
    for strategy, params in STRATEGY_PARAMS.items():
        print(f"  {strategy.value:<18} {strategy.display_name}")
        print(f"                      Window: {params.window} days, jitter span: {params.jitter_span}")
        print(
            f"                      Confidence: 1 - (step / horizon) x {params.confidence_decay}, "
            f"floor {params.confidence_floor}"
        )
    print()
    print(f"  --horizon           Forecast days: {DEFAULT_HORIZON} (default)")
    print(f"                      Range: {MIN_HORIZON}-{MAX_HORIZON}")
    print()

    # Validation
    print("VALIDATION:")
    print("-" * 80)
    print()
    print(f"  --validation-window Hold-out days: {DEFAULT_VALIDATION_WINDOW} (default)")
    print("                      Model replays history[-2w:-w], scored on the last w closes")
    print()

    # Presets
    print("PRESET CONFIGURATIONS:")
    print("-" * 80)
    print()
    for name, config in PRESET_CONFIGS.items():
        print(f"  {name:<12} {config}")
    print()

    print("=" * 80)
    print()
    print("USAGE EXAMPLES:")
    print("-" * 80)
    print()
    print("  # Defaults (RELIANCE, LSTM, 30 days)")
    print("  python -m cli.forecast")
    print()
    print("  # Reproducible ensemble run")
    print("  python -m cli.forecast --symbol TCS --model Ensemble --seed 7")
    print()
    print("  # Compare all models")
    print("  python -m cli.forecast --preset quick --compare")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
