"""Running sums and products.

Each output element depends only on the previous output and the current
input, so ``dst`` and ``src`` may be the same array.
"""

import numpy as np

from seqops.core.types import FloatSequence, as_destination, as_source
from seqops.ops.lengths import check_lengths

__all__ = ["cum_sum", "cum_prod"]


def cum_sum(dst: np.ndarray, src: FloatSequence) -> np.ndarray:
    """Write the cumulative sum of ``src`` into ``dst``.

    ``dst[0] = src[0]`` and ``dst[i] = dst[i-1] + src[i]`` for ``i > 0``.

    Args:
        dst: Destination array, same length as ``src``.
        src: Input sequence. Left unmodified unless it is ``dst``.

    Returns:
        ``dst``.

    Raises:
        LengthMismatch: If the lengths differ.

    Example:
        >>> dst = np.empty(4)
        >>> cum_sum(dst, [1.0, -2.0, 3.0, -4.0])
        array([ 1., -1.,  2., -2.])
    """
    dst = as_destination(dst)
    src = as_source(src)
    check_lengths("cum_sum", dst, src)
    return np.cumsum(src, out=dst)


def cum_prod(dst: np.ndarray, src: FloatSequence) -> np.ndarray:
    """Write the cumulative product of ``src`` into ``dst``.

    ``dst[0] = src[0]`` and ``dst[i] = dst[i-1] * src[i]`` for ``i > 0``.

    Raises:
        LengthMismatch: If the lengths differ.

    Example:
        >>> dst = np.empty(4)
        >>> cum_prod(dst, [1.0, -2.0, 3.0, -4.0])
        array([ 1., -2., -6., 24.])
    """
    dst = as_destination(dst)
    src = as_source(src)
    check_lengths("cum_prod", dst, src)
    return np.cumprod(src, out=dst)
