"""Cropping of the time axis of [length, channels] sequences."""

import json
import logging

from typing import Tuple, Union

import warnings

import numpy as np

import torch

from texcrop.gl.programs import MAP_INPUT
from texcrop.nn._layer import Layer
from texcrop.nn.functional import crop
from texcrop.tensor import Tensor
from texcrop.utils import cropped_output_shape
from texcrop.utils import standardize_cropping


LOGGER = logging.getLogger(__name__)


class Executor:
    """Runs the crop for one layer on one backend."""

    def __init__(self, cropping: Tuple[int, int]):
        self.cropping = cropping

    def execute(self, x: Tensor, materialize: bool = True) -> Tensor:
        raise NotImplementedError


class CpuExecutor(Executor):
    """Copy the kept rows of the input into a new tensor."""

    def execute(self, x, materialize=True):
        output_shape = cropped_output_shape(x.shape, self.cropping)
        output = Tensor(shape=output_shape, dtype=x.dtype)
        left, right = self.cropping
        output.assign(crop(x.tensor, (left, right, 0, 0)))
        return output


class GpuExecutor(Executor):
    """Crop by gathering input texels through an index map.

    The index map has the shape of the output and holds, for every
    output position (i, j), the flat logical index
    (i + left) * channels + j of the input position it is copied from.
    The map and the output texture are built on the first call and
    reused afterwards. Both depend on the input shape: if it changes
    they are built again.
    """

    def __init__(self, cropping, context):
        super().__init__(cropping)
        self.context = context
        self.program = context.compile_program(MAP_INPUT)
        self.input_shape = None
        self.index_map = None
        self.output = None

    @property
    def state(self) -> str:
        if self.index_map is None:
            return 'uninitialized'
        if self.output is None:
            return 'index_map_ready'
        return 'output_ready'

    def build_index_map(self, input_shape) -> Tensor:
        """Return the index map of input_shape, building it if needed."""
        input_shape = tuple(input_shape)
        if self.index_map is not None:
            if input_shape == self.input_shape:
                return self.index_map
            warnings.warn('Input shape changed from {} to {}, rebuilding '
                          'the index map.'.format(self.input_shape,
                                                  input_shape))
            self.output = None

        output_shape = cropped_output_shape(input_shape, self.cropping)
        rows, cols = input_shape

        # i * cols + j
        indices_row, indices_col = np.indices((rows, cols), dtype=np.int32)
        indices = Tensor(indices_row * cols + indices_col, dtype=torch.int32)

        left, right = self.cropping
        index_map = Tensor(shape=output_shape, dtype=torch.int32)
        index_map.assign(indices.sub_view((left, 0), (rows - right, cols)))
        index_map.create_texture(self.context, fmt='int')
        LOGGER.debug('Built index map %s for input %s',
                     output_shape, input_shape)

        self.input_shape = input_shape
        self.index_map = index_map
        return index_map

    def execute(self, x, materialize=True):
        output_shape = cropped_output_shape(x.shape, self.cropping)

        if x.texture is None:
            x.create_texture(self.context, fmt='float')

        self.build_index_map(x.shape)

        if self.output is None:
            self.output = Tensor(shape=output_shape, dtype=x.dtype)
            self.output.create_texture(self.context, fmt='float')

        self.context.run_program(
            self.program,
            output=self.output,
            inputs=[{'input': x, 'name': 'x'},
                    {'input': self.index_map, 'name': 'indexMap'}],
            uniforms=[{'value': x.texture_shape[1], 'type': 'int',
                       'name': 'inputCols'}])

        # GPU -> CPU data transfer
        if materialize:
            self.output.transfer_from_texture()
        return self.output


class Cropping1D(Layer):
    """Remove leading and trailing steps of a [length, channels] input.

    Args:
        cropping: int, or pair of ints (left, right). An int crops the
            same amount on both ends.
        gpu: run on the rendering context instead of the cpu.
        context: rendering context of a gpu layer.
        name: layer name.

    The backend is chosen once, when the layer is built.
    """

    layer_class = 'Cropping1D'

    def __init__(self, cropping: Union[int, Tuple[int, int]] = (0, 0),
                 gpu: bool = False, context=None, name=None):
        super().__init__(name=name, gpu=gpu, context=context)
        self.cropping = standardize_cropping(cropping)
        self.description = json.dumps(list(self.cropping))

        if self.gpu:
            self.executor = GpuExecutor(self.cropping, self.context)
        else:
            self.executor = CpuExecutor(self.cropping)

        self.input_shape = None
        self.output_shape = None
        self.output = None

    def compute_output_shape(self, input_shape):
        return cropped_output_shape(input_shape, self.cropping)

    def call(self, x: Tensor) -> Tensor:
        self.input_shape = x.shape
        self.output_shape = self.compute_output_shape(x.shape)
        # A gpu output nobody reads on the device is copied back to host.
        self.output = self.executor.execute(
            x, materialize=not self.outbound)
        return self.output

    def get_config(self):
        config = super().get_config()
        config['cropping'] = list(self.cropping)
        return config
