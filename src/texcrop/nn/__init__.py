"""Layers running on the cpu or on a rendering context."""

from ._cropping import CpuExecutor
from ._cropping import Cropping1D
from ._cropping import GpuExecutor
from ._layer import Layer


__all__ = (
    'CpuExecutor',
    'Cropping1D',
    'GpuExecutor',
    'Layer',
)
