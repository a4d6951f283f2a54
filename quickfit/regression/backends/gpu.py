"""
GPU backend for line fitting using PyTorch.

Same schedule as the CPU reference (seeded init, per-epoch shuffle, one
full-batch Adam update per epoch) with torch.optim.Adam doing the update.
Supports CUDA and MPS (macOS Apple Silicon).
"""

from typing import Any

import numpy as np

from quickfit.core.compute.timing import Timer
from quickfit.core.result import Result
from quickfit.regression.backends.cpu import EpochCallback, initial_weight, cleaning_warnings
from quickfit.regression.config import TrainingConfig
from quickfit.regression.design import TrainingDesign
from quickfit.regression.solution import FittedLine


class GPUAdamBackend:
    """
    GPU backend using torch.optim.Adam.

    FP32 by default; FP64 on request (not available on MPS).
    """

    def __init__(self, use_fp64: bool = False, device: str = 'cuda'):
        """
        Args:
            use_fp64: If True, train in float64
            device: GPU device ('cuda', 'cuda:0', 'mps')

        Raises:
            RuntimeError: If the device is unavailable or cannot do FP64
            ValueError: If device is not a GPU device string
        """
        import torch

        if device.startswith('cuda'):
            if not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
        elif device == 'mps':
            if not (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()):
                raise RuntimeError(
                    "MPS not available. Requires macOS with Apple Silicon "
                    "and PyTorch with MPS support."
                )
            if use_fp64:
                raise RuntimeError(
                    "MPS does not support float64. Use use_fp64=False "
                    "or use backend='cpu' for double precision."
                )
        else:
            raise ValueError(
                f"Unknown GPU device: {device!r}. Use 'cuda' or 'mps'."
            )

        self.device = torch.device(device)
        self.use_fp64 = use_fp64
        self.dtype = torch.float64 if use_fp64 else torch.float32

    @property
    def name(self) -> str:
        precision = "fp64" if self.use_fp64 else "fp32"
        return f'gpu_adam_{precision}'

    def solve(
        self,
        design: TrainingDesign,
        config: TrainingConfig,
        on_epoch: EpochCallback | None = None,
    ) -> Result[FittedLine]:
        """
        Train on the GPU for exactly config.epochs epochs.

        Returns:
            Result[FittedLine] with parameters copied back to host floats
        """
        import torch

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        rng = np.random.default_rng(config.seed)

        with timer.section('data_transfer_to_gpu'):
            x = torch.from_numpy(np.array(design.x)).to(self.device, self.dtype)
            y = torch.from_numpy(np.array(design.y)).to(self.device, self.dtype)
            w = torch.tensor([initial_weight(rng)], dtype=self.dtype,
                             device=self.device, requires_grad=True)
            b = torch.zeros(1, dtype=self.dtype, device=self.device, requires_grad=True)

        optimizer = torch.optim.Adam(
            [w, b],
            lr=config.learning_rate,
            betas=(config.beta1, config.beta2),
            eps=config.epsilon,
        )
        history: list[float] = []

        for epoch in range(config.epochs):
            with timer.section('epochs'):
                order = torch.from_numpy(rng.permutation(design.n)).to(self.device)
                xb, yb = x[order], y[order]
                optimizer.zero_grad()
                loss = torch.mean((w * xb + b - yb) ** 2)
                loss.backward()
                optimizer.step()
                loss_value = float(loss.item())
            history.append(loss_value)
            if on_epoch is not None and config.reports_at(epoch):
                on_epoch(epoch, loss_value)

        with timer.section('data_transfer_from_gpu'):
            weight = float(w.detach().cpu().item())
            bias = float(b.detach().cpu().item())

        timer.stop()

        line = FittedLine(
            weight=weight,
            bias=bias,
            loss=history[-1],
            loss_history=tuple(history),
        )

        info: dict[str, Any] = {
            'method': 'adam',
            'epochs': config.epochs,
            'learning_rate': config.learning_rate,
            'seed': config.seed,
            'device': str(self.device),
            'dtype': str(self.dtype),
        }

        return Result(
            params=line,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=cleaning_warnings(design),
        )
