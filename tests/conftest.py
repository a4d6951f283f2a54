"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

import quickfit.core.compute.device as device_module
from quickfit.regression import TrainingConfig


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def seeded_config():
    """Default training schedule with a fixed seed."""
    return TrainingConfig(seed=7)


@pytest.fixture
def perfect_line_csv():
    """y = 2x + 1, four rows."""
    return "x,y\n1,3\n2,5\n3,7\n4,9"


@pytest.fixture
def noisy_line_data(rng):
    """y = 2x + 1 plus Gaussian noise, 60 points on [0, 50]."""
    x = rng.uniform(0.0, 50.0, size=60)
    y = 2.0 * x + 1.0 + rng.standard_normal(60) * 0.5
    return x, y


@pytest.fixture
def mixed_csv():
    """
    Three numeric columns (id, score, weight) and one text column.

    weight = 3 * id + 2. Row 5 has a text score, row 9 an empty weight.
    """
    lines = ["id,name,score,weight"]
    for i in range(1, 41):
        score = f"{0.5 * i:.1f}"
        weight = f"{3 * i + 2}"
        if i == 5:
            score = "n/a"
        if i == 9:
            weight = ""
        lines.append(f"{i},player{i},{score},{weight}")
    return "\n".join(lines)


@pytest.fixture
def no_gpu(monkeypatch):
    """Make device detection report no GPU on any machine."""
    monkeypatch.setattr(device_module, 'detect_gpu', lambda: None)
