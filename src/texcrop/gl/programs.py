"""Sources of the programs run by the gpu executors.

Programs are TorchScript functions named main. Texture inputs arrive
as 2D tensors laid out as described by texcrop.utils.texture_shape and
the returned tensor must have the shape of the output texture.
"""

# Gather, for every output texel, the input texel whose flat logical
# index is stored in indexMap. inputCols is the width of the input
# texture, which differs from the logical channel count when the
# input had to be repacked.
MAP_INPUT = """
def main(x: Tensor, indexMap: Tensor, inputCols: int) -> Tensor:
    index = indexMap.long()
    row = torch.div(index, inputCols, rounding_mode='floor')
    col = torch.remainder(index, inputCols)
    return x[row, col]
"""
