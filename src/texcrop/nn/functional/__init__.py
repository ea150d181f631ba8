"""Package containing torch functionals."""

from ._crop import crop


__all__ = (
    'crop',
)
