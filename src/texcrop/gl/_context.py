"""Texture storage and program execution on a torch device."""

import logging

from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

import torch

from texcrop.errors import GpuCompileError
from texcrop.errors import GpuExecutionError
from texcrop.utils import texture_shape


LOGGER = logging.getLogger(__name__)

FORMATS = {
    'float': torch.float32,
    'int': torch.int32,
}

UNIFORM_TYPES = {
    'float': float,
    'int': int,
}


class Texture:
    """A tensor stored on the device as a 2D [rows, cols] texture.

    The texture layout is the row-major flattening of the logical
    shape, possibly repacked into wider rows (see texture_shape), so
    a texel is addressed by its flat logical index divided by the
    texture width.
    """

    def __init__(self, data: torch.Tensor, fmt: str,
                 logical_shape: Sequence[int]):
        assert data.dim() == 2
        self.data = data
        self.format = fmt
        self.logical_shape = tuple(logical_shape)

    @property
    def shape(self) -> Tuple[int, int]:
        return tuple(self.data.shape)

    def __repr__(self):
        return 'Texture(shape={}, format={}, logical_shape={})'.format(
            self.shape, self.format, self.logical_shape)


class Program:
    """A compiled program and the names of the arguments it binds."""

    def __init__(self, function, name: str):
        self.function = function
        self.name = name
        self.arguments = [arg.name for arg in function.schema.arguments]

    def __call__(self, *args):
        return self.function(*args)


class RenderingContext:
    """Device handle used to create textures and run programs.

    Every gpu layer receives its context explicitly. When no device is
    given, cuda is used if available and the cpu otherwise, so that the
    texture code path stays usable on machines without a gpu.
    """

    def __init__(self, device: Union[str, torch.device, None] = None,
                 max_texture_size: int = 4096):
        if max_texture_size <= 0:
            raise ValueError('max_texture_size must be > 0')
        if device is None:
            device = 'cuda' if torch.cuda.is_available() else 'cpu'
        self.device = torch.device(device)
        self.max_texture_size = max_texture_size
        LOGGER.debug('Rendering context on %s, max texture size %d',
                     self.device, max_texture_size)

    def create_texture(self, data: torch.Tensor,
                       fmt: str = 'float') -> Texture:
        """Upload host data into a new texture."""
        if fmt not in FORMATS:
            raise ValueError('Unknown texture format {!r}'.format(fmt))
        rows, cols = texture_shape(data.shape, self.max_texture_size)

        flat = data.reshape(-1)
        padding = rows * cols - flat.numel()
        if padding:
            flat = torch.cat([flat, flat.new_zeros(padding)])

        try:
            texels = flat.reshape(rows, cols).to(
                device=self.device, dtype=FORMATS[fmt],
                copy=True).contiguous()
        except RuntimeError as exc:
            raise GpuExecutionError(
                'Could not upload a {}x{} {} texture'
                .format(rows, cols, fmt)) from exc
        LOGGER.debug('Uploaded %s texture %dx%d for shape %s',
                     fmt, rows, cols, tuple(data.shape))
        return Texture(texels, fmt, data.shape)

    def read_texture(self, texture: Texture) -> torch.Tensor:
        """Download a texture into a host tensor of its logical shape."""
        size = int(np.prod(texture.logical_shape))
        try:
            data = texture.data.reshape(-1)[:size].cpu()
        except RuntimeError as exc:
            raise GpuExecutionError('Could not read back texture') from exc
        LOGGER.debug('Transferred texture %s to host', texture.shape)
        return data.reshape(texture.logical_shape).clone()

    # pylint: disable=no-self-use
    def compile_program(self, source: str, entry: str = 'main') -> Program:
        """Compile the program source and return its entry point."""
        try:
            unit = torch.jit.CompilationUnit(source)
            function = getattr(unit, entry)
        except (RuntimeError, AttributeError) as exc:
            raise GpuCompileError(
                'Failed to compile program {!r}'.format(entry)) from exc
        LOGGER.debug('Compiled program %r', entry)
        return Program(function, entry)

    def run_program(self, program: Program, output,
                    inputs: Iterable[Dict],
                    uniforms: Optional[Iterable[Dict]] = None):
        """Run program and write its result into the output texture.

        inputs are dicts of the form {'input': tensor, 'name': name}
        where tensor owns a texture, uniforms are dicts of the form
        {'value': value, 'type': 'int' or 'float', 'name': name}.
        """
        if output.texture is None:
            raise GpuExecutionError('Output tensor has no texture')

        bindings = {}
        for item in inputs:
            texture = item['input'].texture
            if texture is None:
                raise GpuExecutionError(
                    'Input {!r} has no texture'.format(item['name']))
            if texture.data.device.type != self.device.type:
                raise GpuExecutionError(
                    'Input {!r} lives on {}, expected {}'.format(
                        item['name'], texture.data.device, self.device))
            bindings[item['name']] = texture.data
        for item in uniforms or ():
            if item['type'] not in UNIFORM_TYPES:
                raise GpuExecutionError(
                    'Uniform {!r} has unknown type {!r}'.format(
                        item['name'], item['type']))
            bindings[item['name']] = UNIFORM_TYPES[item['type']](
                item['value'])

        unknown = set(bindings) - set(program.arguments)
        missing = set(program.arguments) - set(bindings)
        if unknown or missing:
            raise GpuExecutionError(
                'Cannot bind program {!r}: unknown {}, missing {}'.format(
                    program.name, sorted(unknown), sorted(missing)))

        try:
            with torch.no_grad():
                result = program(
                    *[bindings[name] for name in program.arguments])
        except (RuntimeError, IndexError) as exc:
            raise GpuExecutionError(
                'Program {!r} failed'.format(program.name)) from exc

        target = output.texture.data
        if result.shape != target.shape:
            raise GpuExecutionError(
                'Program {!r} produced {}, output texture is {}'.format(
                    program.name, tuple(result.shape), tuple(target.shape)))
        target.copy_(result)
