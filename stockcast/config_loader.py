"""
YAML configuration loader for forecasting runs.

Loads run configurations from YAML files, allowing easy sharing and
modification of runs without code changes.
"""
import yaml
from pathlib import Path
from typing import Any, Dict, Union

from .config import ForecastConfig
from .shared.defaults import DEFAULT_DAYS, DEFAULT_HORIZON, DEFAULT_VALIDATION_WINDOW


class ConfigError(ValueError):
    """Raised when a YAML config has the wrong shape."""
    pass


def _section(config_dict: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = config_dict.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Section '{key}' must be a mapping, got {type(value).__name__}")
    return value


def load_config_from_yaml(yaml_path: Union[str, Path]) -> ForecastConfig:
    """
    Load forecasting configuration from YAML file.

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        ForecastConfig object

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty, malformed, or fails config validation
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if not config_dict:
        raise ValueError(f"Empty config file: {yaml_path}")
    if not isinstance(config_dict, dict):
        raise ConfigError(f"Config root must be a mapping: {yaml_path}")

    data = _section(config_dict, 'data')
    model = _section(config_dict, 'model')
    validation = _section(config_dict, 'validation')
    random = _section(config_dict, 'random')

    return ForecastConfig(
        name=config_dict.get('name', yaml_path.stem),
        description=config_dict.get('description', ''),
        symbol=str(data.get('symbol', 'RELIANCE')),
        days=int(data.get('days', DEFAULT_DAYS)),
        strategy=model.get('strategy', 'LSTM'),
        horizon=int(model.get('horizon', DEFAULT_HORIZON)),
        validation_window=int(validation.get('window', DEFAULT_VALIDATION_WINDOW)),
        seed=int(random['seed']) if random.get('seed') is not None else None,
    )


def save_config_to_yaml(config: ForecastConfig, yaml_path: Union[str, Path]) -> None:
    """
    Save forecasting configuration to YAML file.

    Args:
        config: ForecastConfig to save
        yaml_path: Path where to save YAML file
    """
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = {
        'name': config.name,
        'description': config.description,
        'data': {
            'symbol': config.symbol,
            'days': config.days,
        },
        'model': {
            'strategy': config.strategy.value,
            'horizon': config.horizon,
        },
        'validation': {
            'window': config.validation_window,
        },
        'random': {
            'seed': config.seed,
        },
    }

    with open(yaml_path, 'w') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
