"""Host tensor with an optional texture copy on a rendering context."""

from typing import Optional, Sequence

import numpy as np

import torch


class Tensor:
    """A logical tensor used as input and output of layers.

    The host data lives in tensor. A texture is attached by
    create_texture and its content copied back by
    transfer_from_texture. The two copies are not kept in sync
    otherwise: a gpu layer that keeps its output on the device only
    updates the texture.
    """

    def __init__(self, data=None, shape: Optional[Sequence[int]] = None,
                 dtype: torch.dtype = torch.float32):
        if data is None:
            if shape is None:
                raise ValueError('Either data or shape must be given')
            data = torch.zeros(tuple(shape), dtype=dtype)
        elif isinstance(data, np.ndarray):
            data = torch.from_numpy(data).to(dtype)
        elif not isinstance(data, torch.Tensor):
            data = torch.tensor(data, dtype=dtype)
        else:
            data = data.to(dtype)

        if shape is not None and tuple(data.shape) != tuple(shape):
            data = data.reshape(tuple(shape))

        self.tensor = data.cpu()
        self.texture = None
        self.context = None

    @property
    def shape(self):
        return tuple(self.tensor.shape)

    @property
    def dtype(self):
        return self.tensor.dtype

    @property
    def texture_shape(self):
        """Shape of the attached texture, None without one."""
        return None if self.texture is None else self.texture.shape

    def sub_view(self, lo: Sequence[int], hi: Sequence[int]) -> torch.Tensor:
        """Return a view bounded by [lo, hi) on every axis."""
        assert len(lo) == len(hi) == len(self.shape)
        slices = tuple(slice(start, stop) for start, stop in zip(lo, hi))
        return self.tensor[slices]

    def assign(self, source):
        """Copy the values of source (Tensor or torch view) into self."""
        if isinstance(source, Tensor):
            source = source.tensor
        if tuple(source.shape) != self.shape:
            raise ValueError('Cannot assign shape {} to shape {}'.format(
                tuple(source.shape), self.shape))
        self.tensor.copy_(source)

    def create_texture(self, context, fmt: str = 'float'):
        """Upload the host data to a new texture on context."""
        self.texture = context.create_texture(self.tensor, fmt)
        self.context = context
        return self.texture

    def transfer_from_texture(self):
        """Copy the texture content back into the host tensor."""
        if self.texture is None:
            raise ValueError('Tensor has no texture to transfer from')
        data = self.context.read_texture(self.texture)
        self.tensor = data.to(self.tensor.dtype)

    def to_numpy(self) -> np.ndarray:
        return self.tensor.numpy()

    def __repr__(self):
        return 'Tensor(shape={}, dtype={}, texture={})'.format(
            self.shape, self.dtype, self.texture_shape)
