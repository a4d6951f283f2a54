"""
End-to-end regression run.

    text -> parse_csv -> detect_numeric_columns -> select_columns
         -> build_sample -> normalize -> fit -> predictions
         -> compute_metrics -> PlotSeries

Each call is one run. Everything it produces lives on the returned
RegressionRun; nothing is kept at module level, so a new run never sees
plot state from a previous one.

Status text goes to an injected progress sink, any callable taking a
string. Every terminal failure is reported to the sink as its final
message and then re-raised; no partial result is returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from quickfit.core.exceptions import QuickfitError
from quickfit.core.protocols import ProgressSink
from quickfit.regression.config import TrainingConfig
from quickfit.regression.design import TrainingDesign
from quickfit.regression.metrics import Metrics, compute_metrics
from quickfit.regression.normalize import ScaleParams
from quickfit.regression.solution import LineSolution
from quickfit.regression.solvers import BackendChoice, fit
from quickfit.tabular.numbers import ParseMode, check_parse_mode
from quickfit.tabular.parser import Table, parse_csv
from quickfit.tabular.sample import Sample, build_sample
from quickfit.tabular.schema import ColumnSelection, detect_numeric_columns, select_columns
from quickfit.tabular.source import read_text


# === Status messages ===

def loading_message(path: str | Path) -> str:
    return f"Loading {path} ..."


MSG_PARSED = "CSV loaded - detecting numeric columns..."
MSG_PREPARING = "Preparing data and normalizing..."
MSG_TRAINING = "Training model..."
MSG_TRAINED = "Training complete - generating predictions..."
MSG_READY = "Ready - see the chart and metrics."


def selection_message(selection: ColumnSelection) -> str:
    return f'Using X = "{selection.x}" and Y = "{selection.y}"'


def epoch_message(epoch: int, epochs: int, loss: float) -> str:
    return f"Training... epoch {epoch}/{epochs} - loss: {loss:.6f}"


def error_message(error: QuickfitError) -> str:
    return f"Error: {error}"


# === Sinks ===

class NullSink:
    """Discards every message. Used for headless runs."""

    def __call__(self, message: str) -> None:
        pass


class RecordingSink:
    """Keeps every message in order."""

    def __init__(self):
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    @property
    def last(self) -> str | None:
        return self.messages[-1] if self.messages else None


# === Outputs ===

@dataclass(frozen=True)
class PlotSeries:
    """
    Plotting-ready data: observed and predicted series sharing the same
    X values, stable-sorted ascending by X.
    """
    observed: tuple[tuple[float, float], ...]
    predicted: tuple[tuple[float, float], ...]
    x_label: str
    y_label: str

    @classmethod
    def from_arrays(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        y_hat: ArrayLike,
        *,
        x_label: str,
        y_label: str,
    ) -> PlotSeries:
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        y_hat = np.asarray(y_hat, dtype=np.float64)
        order = np.argsort(x, kind='stable')
        xs = x[order].tolist()
        return cls(
            observed=tuple(zip(xs, y[order].tolist())),
            predicted=tuple(zip(xs, y_hat[order].tolist())),
            x_label=x_label,
            y_label=y_label,
        )


@dataclass(frozen=True, eq=False)
class RegressionRun:
    """Everything one run produced."""
    table: Table
    selection: ColumnSelection
    sample: Sample
    solution: LineSolution
    metrics: Metrics
    plot: PlotSeries

    @property
    def design(self) -> TrainingDesign:
        return self.solution.design

    @property
    def scale(self) -> ScaleParams:
        return self.solution.design.scale

    @property
    def predictions(self) -> np.ndarray:
        return self.solution.predictions

    def summary(self) -> str:
        return "\n".join([
            self.metrics.summary(self.selection.x, self.selection.y),
            self.solution.summary(),
        ])

    def as_dict(self) -> dict[str, Any]:
        """JSON-serializable view for a rendering collaborator."""
        line = self.solution.line
        return {
            'x_column': self.selection.x,
            'y_column': self.selection.y,
            'numeric_columns': list(self.selection.numeric_columns),
            'n_rows': self.sample.n_rows,
            'n_observations': self.sample.n_observations,
            'metrics': self.metrics.as_dict(),
            'line': {
                'weight': line.weight,
                'bias': line.bias,
                'loss': line.loss,
                'slope': self.solution.slope,
                'intercept': self.solution.intercept,
            },
            'backend': self.solution.backend_name,
            'warnings': list(self.solution.warnings),
            'plot': {
                'x_label': self.plot.x_label,
                'y_label': self.plot.y_label,
                'observed': [list(p) for p in self.plot.observed],
                'predicted': [list(p) for p in self.plot.predicted],
            },
        }


# === Entry points ===

def run(
    text: str,
    *,
    progress: ProgressSink | None = None,
    config: TrainingConfig | None = None,
    backend: BackendChoice = 'cpu',
    parsing: ParseMode = 'lenient',
) -> RegressionRun:
    """
    Run the full pipeline on raw CSV text.

    Args:
        text: Decoded file contents, comma-delimited, header first
        progress: Receives status text; defaults to a NullSink
        config: Optimizer settings; defaults to TrainingConfig()
        backend: Training backend, see quickfit.regression.fit
        parsing: Number-parsing mode, see quickfit.tabular.numbers

    Returns:
        RegressionRun

    Raises:
        SchemaError: Fewer than 2 numeric columns
        EmptySampleError: No numeric pairs after cleaning
        DegenerateInputError: A selected column is constant
        BackendError: The requested backend is unknown or has no GPU
    """
    sink = progress if progress is not None else NullSink()
    config = config if config is not None else TrainingConfig()
    check_parse_mode(parsing)
    try:
        return _run(text, sink, config, backend, parsing)
    except QuickfitError as e:
        sink(error_message(e))
        raise


def run_file(
    path: str | Path,
    *,
    progress: ProgressSink | None = None,
    **kwargs: Any,
) -> RegressionRun:
    """
    Read a file and run the pipeline on its contents.

    Raises:
        InputAcquisitionError: If the file cannot be read; nothing is parsed
        (plus everything run() raises)
    """
    sink = progress if progress is not None else NullSink()
    sink(loading_message(path))
    try:
        text = read_text(path)
    except QuickfitError as e:
        sink(error_message(e))
        raise
    return run(text, progress=sink, **kwargs)


def _run(
    text: str,
    sink: ProgressSink,
    config: TrainingConfig,
    backend: BackendChoice,
    parsing: ParseMode,
) -> RegressionRun:
    table = parse_csv(text)
    sink(MSG_PARSED)

    numeric = detect_numeric_columns(table.headers, table.rows, parsing=parsing)
    selection = select_columns(numeric)
    sink(selection_message(selection))

    sample = build_sample(table.rows, selection.x, selection.y, parsing=parsing)

    sink(MSG_PREPARING)
    design = TrainingDesign.from_sample(sample)

    sink(MSG_TRAINING)
    solution = fit(
        design,
        config=config,
        backend=backend,
        on_epoch=lambda epoch, loss: sink(epoch_message(epoch, config.epochs, loss)),
    )
    sink(MSG_TRAINED)

    predictions = solution.predictions
    metrics = compute_metrics(sample.y, predictions)
    plot = PlotSeries.from_arrays(
        sample.x, sample.y, predictions,
        x_label=selection.x,
        y_label=selection.y,
    )
    sink(MSG_READY)

    return RegressionRun(
        table=table,
        selection=selection,
        sample=sample,
        solution=solution,
        metrics=metrics,
        plot=plot,
    )
