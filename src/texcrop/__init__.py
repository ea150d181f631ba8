"""Temporal cropping with CPU and texture-backed GPU execution."""

from texcrop.errors import GpuCompileError
from texcrop.errors import GpuExecutionError
from texcrop.errors import InvalidShapeError
from texcrop.errors import TexcropError
from texcrop.tensor import Tensor


__all__ = (
    'GpuCompileError',
    'GpuExecutionError',
    'InvalidShapeError',
    'TexcropError',
    'Tensor',
)
