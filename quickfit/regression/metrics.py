"""
Metrics Calculator.

Scores original-scale predictions against the true values:

    mean = avg(y_true)
    mse  = avg((y_true - y_pred)^2)
    mae  = avg(|y_true - y_pred|)
    r2   = 1 - sum((y_true - y_pred)^2) / sum((y_true - mean)^2)

R² is undefined when every true value is the same. compute_metrics()
raises DegenerateInputError in that case; allow_degenerate=True returns
the raw quotient instead (NaN for a perfect constant fit, -inf otherwise).
"""

from __future__ import annotations

from dataclasses import dataclass, asdict

import numpy as np
from numpy.typing import ArrayLike

from quickfit.core.exceptions import DegenerateInputError
from quickfit.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class Metrics:
    """Fit quality on the original Y scale."""
    mse: float
    mae: float
    r2: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def summary(self, x_label: str | None = None, y_label: str | None = None) -> str:
        lines = []
        if x_label is not None and y_label is not None:
            lines.append(f"Variables: X = {x_label}, Y = {y_label}")
        lines.extend([
            f"MSE: {self.mse:.4f}",
            f"MAE: {self.mae:.4f}",
            f"R²: {self.r2:.4f}",
        ])
        return "\n".join(lines)


def compute_metrics(
    y_true: ArrayLike,
    y_pred: ArrayLike,
    *,
    allow_degenerate: bool = False,
) -> Metrics:
    """
    Compute MSE, MAE and R².

    Args:
        y_true: Observed values, original scale
        y_pred: Predicted values, original scale, same length
        allow_degenerate: Return a non-finite R² for constant y_true
            instead of raising

    Raises:
        ValidationError: If the inputs are empty or non-numeric
        DimensionError: If the inputs differ in length
        DegenerateInputError: If y_true is constant and allow_degenerate
            is False
    """
    t = check_array(y_true, 'y_true')
    p = check_array(y_pred, 'y_pred')
    check_1d(t, 'y_true')
    check_1d(p, 'y_pred')
    check_consistent_length(t, p, names=('y_true', 'y_pred'))
    check_min_samples(t, 1, 'y_true')

    diff = t - p
    se = np.sum(diff * diff)
    ae = np.sum(np.abs(diff))
    n = t.shape[0]

    # Exact equality; the mean of a float constant may round.
    constant = bool(np.all(t == t[0]))
    ss_tot = 0.0 if constant else np.sum((t - np.mean(t)) ** 2)

    if constant and not allow_degenerate:
        raise DegenerateInputError(
            f"every true value equals {t[0]:g}; R² is undefined for a constant target.",
            axis='y_true',
            value=float(t[0]),
        )

    with np.errstate(divide='ignore', invalid='ignore'):
        r2 = 1.0 - se / np.float64(ss_tot)

    return Metrics(mse=float(se / n), mae=float(ae / n), r2=float(r2))
