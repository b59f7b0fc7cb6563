"""
Forecast accuracy metrics: RMSE, MAE, R², directional accuracy, MAPE.

Degenerate inputs (too few points, constant reference, zero reference
prices) produce NaN/inf in the affected fields instead of raising.
"""
from typing import Sequence

import numpy as np

from ..shared.defaults import PRICE_DECIMALS, RATIO_DECIMALS
from ..shared.types import MetricsRecord


ERROR_THRESHOLDS = (2.0, 5.0, 10.0)  # excellent / good / fair upper bounds
ACCURACY_THRESHOLDS = (0.9, 0.7, 0.5)  # excellent / good / fair lower bounds
RATINGS = ("excellent", "good", "fair", "poor")


def _directional_accuracy(reference: np.ndarray, predicted: np.ndarray) -> float:
    if len(reference) < 2:
        return float("nan")
    reference_up = np.diff(reference) > 0
    predicted_up = np.diff(predicted) > 0
    return float(np.mean(reference_up == predicted_up))


def evaluate(reference: Sequence[float], predicted: Sequence[float]) -> MetricsRecord:
    """
    Score predicted values against a reference series.

    Both inputs are truncated to the shorter length.

    Args:
        reference: Observed values
        predicted: Forecast values for the same dates

    Returns:
        MetricsRecord; rmse/mae/mape rounded to 2 decimals, r2 and
        directional_accuracy to 3
    """
    n = min(len(reference), len(predicted))
    if n == 0:
        nan = float("nan")
        return MetricsRecord(rmse=nan, mae=nan, r2=nan, directional_accuracy=nan, mape=nan)

    ref = np.asarray(reference[:n], dtype=float)
    pred = np.asarray(predicted[:n], dtype=float)
    errors = ref - pred

    with np.errstate(divide="ignore", invalid="ignore"):
        residual_ss = float(np.sum(errors ** 2))
        total_ss = float(np.sum((ref - ref.mean()) ** 2))
        rmse = float(np.sqrt(residual_ss / n))
        mae = float(np.mean(np.abs(errors)))
        r2 = 1 - float(np.divide(residual_ss, total_ss))
        mape = float(np.mean(np.abs(errors / ref))) * 100

    return MetricsRecord(
        rmse=round(rmse, PRICE_DECIMALS),
        mae=round(mae, PRICE_DECIMALS),
        r2=round(r2, RATIO_DECIMALS),
        directional_accuracy=round(_directional_accuracy(ref, pred), RATIO_DECIMALS),
        mape=round(mape, PRICE_DECIMALS),
    )


calculate_model_metrics = evaluate


def rate_metric(value: float, kind: str) -> str:
    """
    Qualitative rating for a metric value.

    Args:
        value: Metric value
        kind: "error" (lower is better, e.g. RMSE) or "accuracy" (higher is better, e.g. R²)

    Returns:
        One of "excellent", "good", "fair", "poor"; NaN rates "poor"
    """
    if kind == "error":
        for rating, bound in zip(RATINGS, ERROR_THRESHOLDS):
            if value < bound:
                return rating
        return RATINGS[-1]
    if kind == "accuracy":
        for rating, bound in zip(RATINGS, ACCURACY_THRESHOLDS):
            if value > bound:
                return rating
        return RATINGS[-1]
    raise ValueError(f"kind must be 'error' or 'accuracy', got {kind!r}")
