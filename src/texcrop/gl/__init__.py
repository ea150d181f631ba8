"""Texture and program runtime used by gpu layers."""

from ._context import Program
from ._context import RenderingContext
from ._context import Texture


__all__ = (
    'Program',
    'RenderingContext',
    'Texture',
)
