"""
Tests for min-max normalization and the training design.
"""

import numpy as np
import pytest

from quickfit.core.capabilities import CAPABILITY_NORMALIZED
from quickfit.core.exceptions import DegenerateInputError
from quickfit.regression import ScaleParams, TrainingDesign, fit_scale, normalize
from quickfit.tabular.sample import Sample


class TestScale:

    def test_min_max_per_axis(self):
        sample = Sample.from_arrays([4, -2, 10], [100, 300, 200])
        scale = fit_scale(sample)
        assert scale == ScaleParams(x_min=-2.0, x_max=10.0, y_min=100.0, y_max=300.0)
        assert scale.x_range == 12.0
        assert scale.y_range == 200.0
        assert not scale.is_degenerate

    def test_normalized_into_unit_interval(self, noisy_line_data):
        sample = Sample.from_arrays(*noisy_line_data)
        x_norm, y_norm = normalize(sample, fit_scale(sample))
        for arr in (x_norm, y_norm):
            assert arr.min() == 0.0
            assert arr.max() == 1.0

    def test_round_trip(self, rng):
        x = rng.uniform(-1e6, 1e6, size=50)
        y = rng.uniform(1e-3, 2e-3, size=50)
        sample = Sample.from_arrays(x, y)
        scale = fit_scale(sample)
        x_norm, y_norm = normalize(sample, scale)
        np.testing.assert_allclose(scale.invert_x(x_norm), x, rtol=1e-12, atol=1e-6)
        np.testing.assert_allclose(scale.invert_y(y_norm), y, rtol=1e-12)

    def test_frozen(self):
        scale = ScaleParams(0.0, 1.0, 0.0, 1.0)
        with pytest.raises(AttributeError):
            scale.x_min = 5.0


class TestDegenerate:

    def test_constant_y_raises(self):
        sample = Sample.from_arrays([1, 2, 3], [5, 5, 5], y_column="score")
        with pytest.raises(DegenerateInputError, match="score") as info:
            fit_scale(sample)
        assert info.value.axis == 'y'
        assert info.value.value == 5.0

    def test_constant_x_raises(self):
        sample = Sample.from_arrays([2, 2, 2], [1, 2, 3])
        with pytest.raises(DegenerateInputError) as info:
            fit_scale(sample)
        assert info.value.axis == 'x'

    def test_single_pair_is_degenerate(self):
        with pytest.raises(DegenerateInputError):
            fit_scale(Sample.from_arrays([1], [2]))

    def test_allow_degenerate_gives_nan(self):
        sample = Sample.from_arrays([1, 2, 3], [5, 5, 5])
        scale = fit_scale(sample, allow_degenerate=True)
        assert scale.is_degenerate
        _, y_norm = normalize(sample, scale)
        assert np.all(np.isnan(y_norm))


class TestTrainingDesign:

    def test_from_sample(self):
        sample = Sample.from_arrays([0, 5, 10], [1, 2, 3])
        design = TrainingDesign.from_sample(sample)
        np.testing.assert_allclose(design.x, [0.0, 0.5, 1.0])
        np.testing.assert_allclose(design.y, [0.0, 0.5, 1.0])
        assert design.n == 3
        assert design.sample is sample
        assert design.supports(CAPABILITY_NORMALIZED)
        assert design.metadata['normalized'] is True

    def test_from_arrays(self):
        design = TrainingDesign.from_arrays([1, 2], [2, 1])
        np.testing.assert_allclose(design.y, [1.0, 0.0])

    def test_read_only(self):
        design = TrainingDesign.from_arrays([1, 2], [2, 1])
        with pytest.raises(ValueError):
            design.x[0] = 0.5
