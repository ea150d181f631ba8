"""Base class of the inference layers."""

import itertools

from texcrop.gl import RenderingContext


class Layer:
    """Common wiring of a layer: execution mode, name and connections.

    A gpu layer runs on the rendering context it was built with. If no
    context is given a default one is created. The outbound list holds
    the layers consuming this layer's output: gpu layers leave their
    output on the device as long as somebody downstream will read it.
    """

    layer_class = 'Layer'
    _ids = itertools.count(1)

    def __init__(self, name=None, gpu=False, context=None):
        if name is None:
            name = '{}_{}'.format(self.layer_class.lower(), next(self._ids))
        self.name = name
        self.gpu = bool(gpu)
        if self.gpu and context is None:
            context = RenderingContext()
        self.context = context
        self.description = ''
        self.inbound = []
        self.outbound = []

    def connect(self, layer):
        """Feed the output of this layer into layer and return layer."""
        self.outbound.append(layer)
        layer.inbound.append(self)
        return layer

    def call(self, x):
        raise NotImplementedError

    def __call__(self, x):
        return self.call(x)

    def get_config(self):
        return {'name': self.name, 'gpu': self.gpu}

    @classmethod
    def from_config(cls, config, context=None):
        """Build a layer from the dict returned by get_config."""
        return cls(context=context, **config)

    def __repr__(self):
        return '{}({})'.format(self.layer_class, self.description)
