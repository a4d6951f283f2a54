"""
Training backends.

Available backends:
    CPUAdamBackend: NumPy reference implementation
    GPUAdamBackend: PyTorch implementation (imported lazily; needs torch)
"""

from quickfit.regression.backends.cpu import CPUAdamBackend

__all__ = [
    "CPUAdamBackend",
]
