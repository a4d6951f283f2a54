"""
Normalizer.

Min-max rescaling of each axis into [0, 1]. The scale parameters are
computed once from the Sample and reused to invert predictions back to
the original Y scale before scoring and plotting.

A constant axis has max == min and the rescale would divide by zero.
fit_scale() refuses such input with DegenerateInputError. Passing
allow_degenerate=True keeps the raw arithmetic instead, and the
normalized values come out NaN.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from quickfit.core.exceptions import DegenerateInputError
from quickfit.tabular.sample import Sample


@dataclass(frozen=True)
class ScaleParams:
    """Observed (min, max) of each axis."""
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def x_range(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_range(self) -> float:
        return self.y_max - self.y_min

    @property
    def is_degenerate(self) -> bool:
        """True if either axis is constant."""
        return self.x_range == 0 or self.y_range == 0

    def normalize_x(self, values: ArrayLike) -> NDArray[np.floating[Any]]:
        return _rescale(values, self.x_min, self.x_range)

    def normalize_y(self, values: ArrayLike) -> NDArray[np.floating[Any]]:
        return _rescale(values, self.y_min, self.y_range)

    def invert_x(self, values: ArrayLike) -> NDArray[np.floating[Any]]:
        return np.asarray(values, dtype=np.float64) * self.x_range + self.x_min

    def invert_y(self, values: ArrayLike) -> NDArray[np.floating[Any]]:
        """pred = pred_norm * (y_max - y_min) + y_min"""
        return np.asarray(values, dtype=np.float64) * self.y_range + self.y_min


def _rescale(values: ArrayLike, low: float, span: float) -> NDArray[np.floating[Any]]:
    arr = np.asarray(values, dtype=np.float64)
    with np.errstate(divide='ignore', invalid='ignore'):
        return (arr - low) / np.float64(span)


def fit_scale(sample: Sample, *, allow_degenerate: bool = False) -> ScaleParams:
    """
    Compute per-axis min/max.

    Args:
        sample: Non-empty cleaned sample
        allow_degenerate: Accept a constant axis instead of raising

    Raises:
        DegenerateInputError: If an axis has zero range and
            allow_degenerate is False
    """
    scale = ScaleParams(
        x_min=float(np.min(sample.x)),
        x_max=float(np.max(sample.x)),
        y_min=float(np.min(sample.y)),
        y_max=float(np.max(sample.y)),
    )
    if allow_degenerate:
        return scale

    if scale.x_range == 0:
        raise DegenerateInputError(
            f"X column \"{sample.x_column}\" is constant ({scale.x_min:g} in every row); "
            f"a line cannot be fitted against a single X value.",
            axis='x',
            value=scale.x_min,
        )
    if scale.y_range == 0:
        raise DegenerateInputError(
            f"Y column \"{sample.y_column}\" is constant ({scale.y_min:g} in every row); "
            f"normalization and R² are undefined.",
            axis='y',
            value=scale.y_min,
        )
    return scale


def normalize(
    sample: Sample,
    scale: ScaleParams,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Rescale both axes of the sample into [0, 1]."""
    return scale.normalize_x(sample.x), scale.normalize_y(sample.y)
