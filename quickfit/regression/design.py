"""
Training Design.

Design wraps a Sample and holds the normalized X and Y a backend trains
on, together with the ScaleParams needed to map predictions back. The
Sample knows nothing about normalization; the Design does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from quickfit.core.capabilities import (
    CAPABILITY_MATERIALIZED,
    CAPABILITY_NORMALIZED,
    CAPABILITY_REPEATABLE,
)
from quickfit.regression.normalize import ScaleParams, fit_scale, normalize
from quickfit.tabular.sample import Sample


@dataclass(frozen=True, eq=False)
class TrainingDesign:
    """
    Normalized training data. Immutable after construction.

    Construction:
        TrainingDesign.from_sample(sample)
        TrainingDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _scale: ScaleParams
    _sample: Sample

    @classmethod
    def from_sample(cls, sample: Sample, *, allow_degenerate: bool = False) -> TrainingDesign:
        """
        Normalize a Sample.

        Raises:
            DegenerateInputError: If an axis is constant and
                allow_degenerate is False
        """
        scale = fit_scale(sample, allow_degenerate=allow_degenerate)
        x_norm, y_norm = normalize(sample, scale)
        x_norm.setflags(write=False)
        y_norm.setflags(write=False)
        return cls(_x=x_norm, _y=y_norm, _scale=scale, _sample=sample)

    @classmethod
    def from_arrays(cls, x: Any, y: Any, **kwargs: Any) -> TrainingDesign:
        """Build directly from original-scale arrays."""
        return cls.from_sample(Sample.from_arrays(x, y), **kwargs)

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Normalized input values."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Normalized target values."""
        return self._y

    @property
    def scale(self) -> ScaleParams:
        return self._scale

    @property
    def sample(self) -> Sample:
        """Original-scale sample."""
        return self._sample

    @property
    def n(self) -> int:
        return int(self._x.shape[0])

    @property
    def n_observations(self) -> int:
        return self.n

    @property
    def metadata(self) -> dict[str, Any]:
        meta = self._sample.metadata
        meta['n'] = self.n
        meta['normalized'] = True
        return meta

    def supports(self, capability: str) -> bool:
        return capability in (
            CAPABILITY_MATERIALIZED,
            CAPABILITY_REPEATABLE,
            CAPABILITY_NORMALIZED,
        )
