"""
Solver dispatch for line fitting.

This module provides the fit() function (public API) and backend selection.
"""

import warnings
from typing import Literal

from quickfit.core.compute.device import select_device
from quickfit.core.exceptions import BackendError
from quickfit.core.protocols import Backend
from quickfit.regression.backends.cpu import CPUAdamBackend, EpochCallback
from quickfit.regression.config import TrainingConfig
from quickfit.regression.design import TrainingDesign
from quickfit.regression.solution import FittedLine, LineSolution
from quickfit.tabular.sample import Sample

BackendChoice = Literal['auto', 'cpu', 'gpu', 'cpu_adam', 'gpu_adam']


def fit(
    data: Sample | TrainingDesign,
    *,
    config: TrainingConfig | None = None,
    backend: BackendChoice = 'cpu',
    on_epoch: EpochCallback | None = None,
    allow_degenerate: bool = False,
) -> LineSolution:
    """
    Fit y = w * x + b with Adam on min-max normalized data.

    Runs exactly config.epochs full-batch epochs. There is no
    convergence check.

    Args:
        data: A cleaned Sample (normalized here) or a ready TrainingDesign
        config: Optimizer settings; defaults to TrainingConfig()
        backend: Computational backend to use:
            - 'cpu' / 'cpu_adam': NumPy reference (default)
            - 'gpu' / 'gpu_adam': PyTorch on CUDA or MPS
            - 'auto': GPU if one is available, else CPU
        on_epoch: Called with (epoch, loss) every config.report_every
            epochs, starting at epoch 0
        allow_degenerate: Normalize a constant axis to NaN instead of
            raising (only used when data is a Sample)

    Returns:
        LineSolution with the fitted line and original-scale predictions

    Raises:
        DegenerateInputError: If an axis of the Sample is constant
        BackendError: If the backend is unknown, or 'gpu' was requested
            and no GPU is usable

    Example:
        >>> from quickfit.tabular import Sample
        >>> from quickfit.regression import fit, TrainingConfig
        >>> sample = Sample.from_arrays([1, 2, 3, 4], [3, 5, 7, 9])
        >>> solution = fit(sample, config=TrainingConfig(seed=0))
        >>> round(solution.slope, 1)
        2.0
    """
    if config is None:
        config = TrainingConfig()

    if isinstance(data, TrainingDesign):
        design = data
    else:
        design = TrainingDesign.from_sample(data, allow_degenerate=allow_degenerate)

    backend_impl = _get_backend(backend)
    result = backend_impl.solve(design, config, on_epoch)
    return LineSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice) -> Backend[TrainingDesign, FittedLine]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        BackendError: If the backend is unknown, or a GPU was requested
            and none is usable
    """
    if choice in ('cpu', 'cpu_adam'):
        return CPUAdamBackend()

    elif choice in ('gpu', 'gpu_adam'):
        try:
            device = select_device('gpu')
            from quickfit.regression.backends.gpu import GPUAdamBackend
            return GPUAdamBackend(device=device.torch_device)
        except (RuntimeError, ImportError) as e:
            raise BackendError(
                f"backend {choice!r} is not usable: {e} Use backend='cpu' instead.",
                backend=choice,
            ) from e

    elif choice == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            from quickfit.regression.backends.gpu import GPUAdamBackend
            try:
                return GPUAdamBackend(device=device.torch_device)
            except RuntimeError as e:
                warnings.warn(f"{e} Falling back to CPU.")
        return CPUAdamBackend()

    else:
        raise BackendError(
            f"Unknown backend: {choice!r}. Use 'cpu', 'gpu' or 'auto'.",
            backend=str(choice),
        )
