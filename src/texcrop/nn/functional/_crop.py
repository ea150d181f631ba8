"""Implement the cropping functional for pytorch."""

from typing import Tuple

import torch

from texcrop.errors import InvalidShapeError


def crop(input_: torch.Tensor, crop_: Tuple[int, ...]) -> torch.Tensor:
    """Crop the trailing axes of a tensor using an array of values.

    Opposite operation of pad. Values come in (left, right) pairs,
    one pair per axis, the pairs covering the last len(crop_) // 2
    axes of the input.
    Args:
        input_: Input tensor.
        crop_: Tuple of crop values.

    Returns:
        A view of the cropped tensor.

    """
    if len(crop_) % 2 != 0:
        raise ValueError('crop_ should contain (left, right) pairs')
    pairs = [(crop_[i], crop_[i + 1]) for i in range(0, len(crop_) - 1, 2)]
    if len(pairs) > len(input_.shape):
        raise ValueError('crop_ has more pairs than the input has axes')

    axes = input_.shape[len(input_.shape) - len(pairs):]

    # Construct the bounds of each cropped axis.
    slices = [...]
    for size, (left, right) in zip(axes, pairs):
        if left < 0 or right < 0:
            raise ValueError('crop values must be >= 0')
        if left + right >= size:
            raise InvalidShapeError(
                'Cropping ({}, {}) leaves nothing of an axis of size {}'
                .format(left, right, size))
        slices.append(slice(left, size - right, None))

    # Apply the crop and return
    return input_[tuple(slices)]
