#!/usr/bin/env python3
"""
Forecast CLI.

Generates a synthetic history for a symbol, forecasts it with one strategy
(or all of them with --compare), and reports hold-out validation metrics.
"""
import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

import numpy as np

from stockcast.config import ForecastConfig, DEFAULT_CONFIG, PRESET_CONFIGS
from stockcast.config_loader import load_config_from_yaml
from stockcast.data.generator import generate_series
from stockcast.data.symbols import get_symbol
from stockcast.evaluation.metrics import rate_metric
from stockcast.evaluation.validation import run_model, compare_strategies
from stockcast.forecasting.summary import summarize_forecast
from stockcast.shared.types import ForecastStrategy

logger = logging.getLogger(__name__)

HISTORY_CSV = "history.csv"
FORECAST_CSV = "forecast.csv"
COMPARISON_CSV = "comparison.csv"


def setup_logging(verbose: bool = False):
    """
    Setup logging to stdout.

    Args:
        verbose: If True, use DEBUG level, otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Forecast a synthetic stock series and validate the model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # 30-day LSTM forecast for RELIANCE (defaults)
    python -m cli.forecast

    # Ensemble forecast over 90 days, reproducible
    python -m cli.forecast --symbol TCS --model Ensemble --horizon 90 --seed 7

    # Compare all strategies and save CSVs
    python -m cli.forecast --symbol INFY --compare --csv results/
        """
    )
    parser.add_argument(
        "--symbol", "-s",
        type=str,
        help="Symbol to simulate (unknown symbols start at the fallback base price)",
    )
    parser.add_argument(
        "--days", "-d",
        type=int,
        help="Days of synthetic history (default: 252)",
    )
    parser.add_argument(
        "--model", "-m",
        type=str,
        choices=[s.value for s in ForecastStrategy],
        help="Forecasting strategy (default: LSTM)",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        help="Forecast horizon in days, 1-180 (default: 30)",
    )
    parser.add_argument(
        "--validation-window",
        type=int,
        help="Hold-out window for validation metrics (default: 30)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--preset", "-p",
        type=str,
        choices=list(PRESET_CONFIGS.keys()),
        help="Use a preset configuration",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Load configuration from YAML file (e.g. configs/default.yaml)",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Run every strategy and print a comparison table",
    )
    parser.add_argument(
        "--csv",
        type=str,
        metavar="OUTPUT_DIR",
        help="Write history, forecast and comparison CSVs to this directory",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ForecastConfig:
    """Start from YAML/preset/default, then apply explicit command-line overrides."""
    if args.config:
        config = load_config_from_yaml(args.config)
    elif args.preset:
        config = PRESET_CONFIGS[args.preset]
    else:
        config = DEFAULT_CONFIG

    overrides = {
        "symbol": args.symbol,
        "days": args.days,
        "strategy": args.model,
        "horizon": args.horizon,
        "validation_window": args.validation_window,
        "seed": args.seed,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return dataclasses.replace(config, **overrides) if overrides else config


def _print_header(config: ForecastConfig, last_close: float, change_pct: float):
    entry = get_symbol(config.symbol)
    title = f"{config.symbol} - {entry.name} ({entry.sector})" if entry else config.symbol
    print("=" * 80)
    print(title)
    print("=" * 80)
    print(f"History:      {config.days} days, last close {last_close:,.2f} ({change_pct:+.2f}%)")


def _print_run(run, last_close: float):
    summary = summarize_forecast(run.forecast, last_close)
    metrics = run.metrics
    print(f"Model:        {run.strategy.display_name}")
    print(f"Horizon:      {len(run.forecast)} days")
    print()
    print("FORECAST:")
    print("-" * 80)
    for label, change in (("Next day", summary.next_day), ("Week", summary.week), ("Month", summary.month)):
        print(f"  {label:<10} {change.predicted:>12,.2f}  {change.percentage:+7.2f}%  {change.direction}")
    print(f"  Avg. confidence: {summary.average_confidence * 100:.1f}%")
    print(f"  Expected move:   {summary.magnitude}")
    print()
    print("VALIDATION METRICS:")
    print("-" * 80)
    print(f"  RMSE:                 {metrics.rmse:>10}  ({rate_metric(metrics.rmse, 'error')})")
    print(f"  MAE:                  {metrics.mae:>10}  ({rate_metric(metrics.mae, 'error')})")
    print(f"  R2:                   {metrics.r2:>10}  ({rate_metric(metrics.r2, 'accuracy')})")
    print(
        f"  Directional accuracy: {metrics.directional_accuracy * 100:>9.1f}%"
        f"  ({rate_metric(metrics.directional_accuracy, 'accuracy')})"
    )
    print(f"  MAPE:                 {metrics.mape:>9}%")


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = resolve_config(args)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    logger.debug(f"Resolved config: {config}")

    rng = np.random.default_rng(config.seed)
    history = generate_series(config.symbol, config.days, rng=rng)
    _print_header(config, history.last_close, history.daily_change_pct())

    output_dir = Path(args.csv) if args.csv else None
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        history.to_frame().to_csv(output_dir / HISTORY_CSV)

    try:
        if args.compare:
            comparison = compare_strategies(
                history, config.horizon, validation_window=config.validation_window, rng=rng,
            )
            print()
            print("STRATEGY COMPARISON (sorted by RMSE):")
            print("-" * 80)
            print(comparison.to_string(index=False))
            if output_dir is not None:
                comparison.to_csv(output_dir / COMPARISON_CSV, index=False)
        else:
            run = run_model(
                history, config.strategy, config.horizon,
                validation_window=config.validation_window, rng=rng,
            )
            _print_run(run, history.last_close)
            if output_dir is not None:
                run.forecast.to_frame().to_csv(output_dir / FORECAST_CSV)
    except ValueError as e:
        logger.error(f"Forecast failed: {e}")
        return 1

    if output_dir is not None:
        print(f"\nCSV files saved to {output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
