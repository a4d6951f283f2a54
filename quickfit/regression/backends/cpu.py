"""
CPU reference backend for line fitting.

Full-batch Adam in NumPy on the normalized design. This is the reference
implementation the GPU backend is validated against.
"""

import math
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from quickfit.core.compute.timing import Timer
from quickfit.core.result import Result
from quickfit.regression.config import TrainingConfig
from quickfit.regression.design import TrainingDesign
from quickfit.regression.solution import FittedLine

EpochCallback = Callable[[int, float], None]

# Glorot-uniform bound for a dense unit with fan_in = fan_out = 1
INIT_LIMIT = math.sqrt(3.0)


def initial_weight(rng: np.random.Generator) -> float:
    """Draw the starting weight; the bias always starts at zero."""
    return float(rng.uniform(-INIT_LIMIT, INIT_LIMIT))


def mse_and_gradient(
    params: NDArray[np.floating[Any]],
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> tuple[float, NDArray[np.floating[Any]]]:
    """
    Loss and gradient of mean((w*x + b - y)^2) with respect to (w, b).
    """
    w, b = params
    residual = w * x + b - y
    loss = float(np.mean(residual * residual))
    grad = np.array([
        2.0 * np.mean(residual * x),
        2.0 * np.mean(residual),
    ])
    return loss, grad


class AdamState:
    """
    First and second moment estimates for Adam.

    step() returns updated parameters; the input array is not modified.
    """

    def __init__(self, n_params: int, config: TrainingConfig):
        self.config = config
        self.m = np.zeros(n_params)
        self.v = np.zeros(n_params)
        self.t = 0

    def step(
        self,
        params: NDArray[np.floating[Any]],
        grad: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        cfg = self.config
        self.t += 1
        self.m = cfg.beta1 * self.m + (1.0 - cfg.beta1) * grad
        self.v = cfg.beta2 * self.v + (1.0 - cfg.beta2) * grad * grad
        lr_t = (
            cfg.learning_rate
            * math.sqrt(1.0 - cfg.beta2 ** self.t)
            / (1.0 - cfg.beta1 ** self.t)
        )
        return params - lr_t * self.m / (np.sqrt(self.v) + cfg.epsilon)


class CPUAdamBackend:
    """
    CPU backend: NumPy Adam, full batch.

    Implements the Backend protocol for TrainingDesign -> FittedLine.
    """

    @property
    def name(self) -> str:
        return 'cpu_adam'

    def solve(
        self,
        design: TrainingDesign,
        config: TrainingConfig,
        on_epoch: EpochCallback | None = None,
    ) -> Result[FittedLine]:
        """
        Train y_norm = w * x_norm + b for exactly config.epochs epochs.

        Algorithm, per epoch:
            1. Reshuffle traversal order
            2. Compute loss and gradient over the full batch
            3. Apply one Adam update
            4. Report (epoch, loss) when config.reports_at(epoch)

        Args:
            design: Normalized training design
            config: Optimizer settings
            on_epoch: Called with (epoch, loss) at reporting epochs

        Returns:
            Result containing FittedLine
        """
        timer = Timer()
        timer.start()

        rng = np.random.default_rng(config.seed)
        x, y = design.x, design.y
        params = np.array([initial_weight(rng), 0.0])
        adam = AdamState(2, config)
        history: list[float] = []

        for epoch in range(config.epochs):
            with timer.section('epochs'):
                order = rng.permutation(design.n)
                loss, grad = mse_and_gradient(params, x[order], y[order])
                params = adam.step(params, grad)
            history.append(loss)
            if on_epoch is not None and config.reports_at(epoch):
                on_epoch(epoch, loss)

        timer.stop()

        line = FittedLine(
            weight=float(params[0]),
            bias=float(params[1]),
            loss=history[-1],
            loss_history=tuple(history),
        )

        info: dict[str, Any] = {
            'method': 'adam',
            'epochs': config.epochs,
            'learning_rate': config.learning_rate,
            'seed': config.seed,
            'device': 'cpu',
        }

        return Result(
            params=line,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=cleaning_warnings(design),
        )


def cleaning_warnings(design: TrainingDesign) -> tuple[str, ...]:
    sample = design.sample
    if sample.n_dropped == 0:
        return ()
    return (
        f"dropped {sample.n_dropped} of {sample.n_rows} rows with a missing "
        f"or non-numeric value in \"{sample.x_column}\" or \"{sample.y_column}\"",
    )
