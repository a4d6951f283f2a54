"""
Single-variable line fitting.

Public API:
    fit(sample, ...) -> LineSolution
    compute_metrics(y_true, y_pred) -> Metrics

fit() normalizes the sample, picks a backend and trains; it is the only
training entry point.

Example:
    >>> from quickfit.regression import fit, compute_metrics
    >>> solution = fit(sample)
    >>> metrics = compute_metrics(sample.y, solution.predictions)
    >>> print(metrics.summary())
"""

from quickfit.regression.config import TrainingConfig
from quickfit.regression.normalize import ScaleParams, fit_scale, normalize
from quickfit.regression.design import TrainingDesign
from quickfit.regression.solution import FittedLine, LineSolution
from quickfit.regression.solvers import fit
from quickfit.regression.metrics import Metrics, compute_metrics

__all__ = [
    "fit",
    "compute_metrics",
    "TrainingConfig",
    "ScaleParams",
    "fit_scale",
    "normalize",
    "TrainingDesign",
    "FittedLine",
    "LineSolution",
    "Metrics",
]
