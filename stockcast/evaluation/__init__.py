"""
Evaluation module.

Provides forecast accuracy metrics, hold-out validation of a single
strategy, and side-by-side comparison of all strategies.
"""
from .metrics import evaluate, calculate_model_metrics, rate_metric
from .validation import ModelRun, validate_strategy, run_model, compare_strategies

__all__ = [
    'evaluate',
    'calculate_model_metrics',
    'rate_metric',
    'ModelRun',
    'validate_strategy',
    'run_model',
    'compare_strategies',
]
