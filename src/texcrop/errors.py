"""Exceptions raised by texcrop."""


class TexcropError(Exception):
    """Base class of every texcrop error."""


class InvalidShapeError(TexcropError, ValueError):
    """The crop widths leave no positions on the cropped axis."""


class GpuCompileError(TexcropError, RuntimeError):
    """A program could not be compiled for the rendering context."""


class GpuExecutionError(TexcropError, RuntimeError):
    """Binding a texture or running a program failed."""
