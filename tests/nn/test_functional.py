"""Test the functional module."""

import pytest

import torch

from texcrop.errors import InvalidShapeError
from texcrop.nn.functional import crop


def test_crop_simple():
    """Check that cropping along the two axes gives the expected result."""
    tt_input = torch.Tensor((
        (0.0, 0.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 2.0, 3.0, 0.0),
        (0.0, 4.0, 5.0, 6.0, 0.0),
        (0.0, 7.0, 8.0, 9.0, 0.0),
        (0.0, 0.0, 0.0, 0.0, 0.0),
    ))[None, None, :]

    assert crop(tt_input, (1, 2, 2, 1)) \
        .equal(torch.Tensor((
            (2.0, 3.0),
            (5.0, 6.0),
        ))[None, None, :])


def test_crop_time_axis():
    """A (left, right, 0, 0) crop only removes rows."""
    tt_input = torch.arange(40.0).reshape(10, 4)
    assert crop(tt_input, (2, 3, 0, 0)).equal(tt_input[2:7])
    assert crop(tt_input, (0, 0, 0, 0)).equal(tt_input)


def test_crop_returns_view():
    tt_input = torch.arange(12.0).reshape(4, 3)
    view = crop(tt_input, (1, 1))
    tt_input[0, 1] = -1.0
    assert view[0, 0] == -1.0


@pytest.mark.parametrize('crop_,error', [
    ((1, 2, 3), ValueError),
    ((1, 1, 1, 1, 1, 1), ValueError),
    ((-1, 0), ValueError),
    ((2, 2), InvalidShapeError),
    ((0, 3, 0, 0), InvalidShapeError),
])
def test_crop_invalid(crop_, error):
    with pytest.raises(error):
        crop(torch.zeros(3, 4), crop_)
