"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from quickfit.core.result import Result

if TYPE_CHECKING:
    from quickfit.regression.design import TrainingDesign


@dataclass(frozen=True)
class FittedLine:
    """
    Parameter payload: y_norm = weight * x_norm + bias.

    This is the immutable data computed by backends. loss is the
    mean squared error (normalized scale) of the last epoch.
    """
    weight: float
    bias: float
    loss: float
    loss_history: tuple[float, ...] = ()

    def predict_normalized(self, x_norm: ArrayLike) -> NDArray[np.floating[Any]]:
        return self.weight * np.asarray(x_norm, dtype=np.float64) + self.bias


@dataclass
class LineSolution:
    """
    User-facing training results.

    Wraps the backend Result and the design it was trained on, and maps
    everything back to the original scale.
    """
    _result: Result[FittedLine]
    _design: TrainingDesign

    _predictions: NDArray[np.floating[Any]] | None = None

    @property
    def line(self) -> FittedLine:
        return self._result.params

    @property
    def weight(self) -> float:
        """Slope on the normalized scale."""
        return self._result.params.weight

    @property
    def bias(self) -> float:
        """Intercept on the normalized scale."""
        return self._result.params.bias

    @property
    def final_loss(self) -> float:
        return self._result.params.loss

    @property
    def loss_history(self) -> tuple[float, ...]:
        return self._result.params.loss_history

    @property
    def slope(self) -> float:
        """Slope on the original scale."""
        scale = self._design.scale
        return self.weight * scale.y_range / scale.x_range

    @property
    def intercept(self) -> float:
        """Intercept on the original scale."""
        scale = self._design.scale
        return scale.y_min + scale.y_range * self.bias - self.slope * scale.x_min

    @property
    def predictions_normalized(self) -> NDArray[np.floating[Any]]:
        return self.line.predict_normalized(self._design.x)

    @property
    def predictions(self) -> NDArray[np.floating[Any]]:
        """
        Predictions for every sample X, in sample order, on the original Y scale.
        """
        if self._predictions is None:
            self._predictions = self._design.scale.invert_y(self.predictions_normalized)
        return self._predictions

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Predict original-scale Y for original-scale X values."""
        scale = self._design.scale
        return scale.invert_y(self.line.predict_normalized(scale.normalize_x(x)))

    @property
    def design(self) -> TrainingDesign:
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Text summary of the fitted line."""
        sample = self._design.sample
        lines = [
            f"Line: {sample.y_column} = {self.slope:.4f} * {sample.x_column} "
            f"{'+' if self.intercept >= 0 else '-'} {abs(self.intercept):.4f}",
            f"Observations: {sample.n_observations} of {sample.n_rows} rows",
            f"Epochs: {self.info.get('epochs')}, final loss: {self.final_loss:.6f}",
            f"Backend: {self.backend_name}",
        ]
        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds']:.3f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LineSolution(slope={self.slope:.6g}, intercept={self.intercept:.6g}, "
            f"loss={self.final_loss:.3g}, backend={self.backend_name!r})"
        )
