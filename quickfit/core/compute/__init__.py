"""
Shared compute infrastructure for quickfit.

Hardware detection and timing used by the training backends. Domain
backends themselves live in regression/backends/.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
"""

from quickfit.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from quickfit.core.compute.timing import Timer

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
]
