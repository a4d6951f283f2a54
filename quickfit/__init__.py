"""
quickfit: instant single-variable linear regression over arbitrary CSV text.

Give it a comma-delimited table with an unknown schema; it infers which two
columns carry a numeric relationship, fits a line with Adam on min-max
normalized data, and scores the fit with MSE, MAE and R².

Submodules:
    tabular: Parsing, numeric-column detection, sample building
    regression: Normalization, training backends, metrics
    pipeline: End-to-end run with progress reporting
"""

__version__ = "0.1.0"

from quickfit import tabular
from quickfit import regression
from quickfit.pipeline import run, run_file, RegressionRun, PlotSeries

__all__ = [
    "__version__",
    "tabular",
    "regression",
    "run",
    "run_file",
    "RegressionRun",
    "PlotSeries",
]
