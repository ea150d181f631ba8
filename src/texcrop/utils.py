"""Shape helpers shared by the cpu and gpu code paths."""

from numbers import Integral
from typing import Iterable, Sequence, Tuple, Union

import numpy as np

from texcrop.errors import GpuExecutionError
from texcrop.errors import InvalidShapeError


def standardize_cropping(
        cropping: Union[int, Iterable[int]]) -> Tuple[int, int]:
    """Turn a crop width or a pair of widths into a (left, right) tuple.

    A single integer c is applied to both ends, i.e. (c, c).
    """
    if isinstance(cropping, Integral):
        cropping = ((cropping,) * 2)
    elif isinstance(cropping, Iterable):
        cropping = tuple(cropping)
    else:
        raise TypeError('cropping should be an int or a pair of ints, '
                        'got {!r}'.format(cropping))

    if len(cropping) != 2:
        raise ValueError('cropping should have exactly two values, '
                         'got {!r}'.format(cropping))
    if not all(isinstance(c, Integral) for c in cropping):
        raise TypeError('cropping values should be ints, '
                        'got {!r}'.format(cropping))
    if any(c < 0 for c in cropping):
        raise ValueError('cropping values must be >= 0, '
                         'got {!r}'.format(cropping))
    return tuple(int(c) for c in cropping)


def cropped_output_shape(input_shape: Sequence[int],
                         cropping: Tuple[int, int]) -> Tuple[int, int]:
    """Compute the shape of a [length, channels] tensor after cropping.

    Raises InvalidShapeError when nothing is left on the time axis.
    """
    if len(input_shape) != 2:
        raise InvalidShapeError(
            'Expected a [length, channels] input, got shape {}'
            .format(tuple(input_shape)))
    length, channels = input_shape
    left, right = cropping
    if left + right >= length:
        raise InvalidShapeError(
            'Cropping {} removes the whole time axis of an input '
            'with shape {}'.format(tuple(cropping), tuple(input_shape)))
    return (length - left - right, channels)


def texture_shape(shape: Sequence[int], max_size: int) -> Tuple[int, int]:
    """Return the [rows, cols] layout of a tensor stored in a 2D texture.

    Leading axes are folded into the rows. If either side exceeds
    max_size the flat row-major data is repacked into rows of
    max_size texels, the last row being zero padded.
    """
    assert max_size > 0
    shape = np.array(shape, dtype=np.int64)
    size = int(np.prod(shape))
    cols = int(shape[-1]) if len(shape) else 1
    rows = size // cols if cols else 0

    if rows <= max_size and cols <= max_size:
        return (rows, cols)

    rows = -(-size // max_size)
    if rows > max_size:
        raise GpuExecutionError(
            'Tensor with shape {} does not fit in a {}x{} texture'
            .format(tuple(shape.tolist()), max_size, max_size))
    return (rows, max_size)
