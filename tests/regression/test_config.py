"""
Tests for TrainingConfig.
"""

import pytest

from quickfit.core.exceptions import ValidationError
from quickfit.regression import TrainingConfig


class TestDefaults:

    def test_reference_schedule(self):
        config = TrainingConfig()
        assert config.epochs == 250
        assert config.learning_rate == 0.1
        assert config.report_every == 25
        assert config.seed is None

    def test_reporting_epochs(self):
        config = TrainingConfig()
        reported = [e for e in range(config.epochs) if config.reports_at(e)]
        assert reported == [0, 25, 50, 75, 100, 125, 150, 175, 200, 225]


class TestValidation:

    @pytest.mark.parametrize("kwargs", [
        {"epochs": 0},
        {"learning_rate": 0.0},
        {"learning_rate": -0.1},
        {"report_every": 0},
        {"epsilon": 0.0},
        {"beta1": 1.0},
        {"beta2": -0.1},
    ])
    def test_invalid_settings(self, kwargs):
        with pytest.raises(ValidationError):
            TrainingConfig(**kwargs)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            TrainingConfig().epochs = 10
