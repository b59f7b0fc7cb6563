"""
Run configuration for forecasting.

A ForecastConfig names one symbol, one strategy and the lengths used to
generate, forecast and validate. Config validation runs at construction time
(fail fast with clear errors).
"""
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .shared.defaults import (
    DEFAULT_DAYS, DEFAULT_HORIZON, DEFAULT_VALIDATION_WINDOW,
    MIN_HORIZON, MAX_HORIZON,
)
from .shared.types import ForecastStrategy


def _validate_config(
    *,
    days: int,
    horizon: int,
    validation_window: int,
    seed: Optional[int] = None,
) -> None:
    """Validate lengths and seed. Raises ValueError with clear message on failure."""
    if days <= 0:
        raise ValueError(f"days must be > 0, got {days}")
    if not (MIN_HORIZON <= horizon <= MAX_HORIZON):
        raise ValueError(
            f"horizon must be in [{MIN_HORIZON}, {MAX_HORIZON}], got {horizon}"
        )
    if validation_window <= 0:
        raise ValueError(f"validation_window must be > 0, got {validation_window}")
    if 2 * validation_window > days:
        raise ValueError(
            f"validation_window ({validation_window}) needs at least {2 * validation_window} days "
            f"of history, got days={days}"
        )
    if seed is not None and seed < 0:
        raise ValueError(f"seed must be >= 0, got {seed}")


@dataclass
class ForecastConfig:
    """Complete forecasting run configuration."""
    name: str = "default"
    description: str = ""

    # Data
    symbol: str = "RELIANCE"
    days: int = DEFAULT_DAYS

    # Model
    strategy: Union[ForecastStrategy, str] = ForecastStrategy.MOMENTUM
    horizon: int = DEFAULT_HORIZON

    # Validation
    validation_window: int = DEFAULT_VALIDATION_WINDOW

    # Randomness (None = non-deterministic)
    seed: Optional[int] = None

    def __post_init__(self):
        self.strategy = ForecastStrategy.parse(self.strategy)
        self.symbol = self.symbol.strip().upper()
        _validate_config(
            days=self.days,
            horizon=self.horizon,
            validation_window=self.validation_window,
            seed=self.seed,
        )

    def __str__(self) -> str:
        seed = self.seed if self.seed is not None else "random"
        return (
            f"{self.name}: {self.symbol} {self.days}d, {self.strategy.value} "
            f"horizon={self.horizon}, validation={self.validation_window}d, seed={seed}"
        )


DEFAULT_CONFIG = ForecastConfig(name="default")

PRESET_CONFIGS: Dict[str, ForecastConfig] = {
    "default": DEFAULT_CONFIG,
    "quick": ForecastConfig(
        name="quick",
        description="Short history and one-week horizon",
        days=90,
        horizon=7,
        validation_window=14,
    ),
    "long_range": ForecastConfig(
        name="long_range",
        description="Two years of history, six-month ensemble forecast",
        days=504,
        strategy=ForecastStrategy.ENSEMBLE,
        horizon=MAX_HORIZON,
        validation_window=60,
    ),
}
