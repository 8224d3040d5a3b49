"""Element-wise arithmetic over float64 sequences.

Operations come in two flavours:

    - **In place** (``add``, ``sub``, ``mul``, ``add_const``, ``scale``,
      ``add_scaled``): the first sequence argument is overwritten.
    - **Into a destination** (``add_to``, ``sub_to``, ``mul_to``): the result
      is written into ``dst`` and the operands are left alone. ``dst`` may be
      one of the operands.

Every argument is validated before anything is written, so a failing call
leaves all of its inputs untouched.

Examples:
    >>> import numpy as np
    >>> from seqops.ops import add, add_to
    >>>
    >>> s1 = np.array([1.0, 2.0, 3.0, 4.0])
    >>> add(s1, [5.0, 6.0, 7.0, 8.0])
    >>> s1
    array([ 6.,  8., 10., 12.])
    >>>
    >>> dst = np.empty(4)
    >>> add_to(dst, [1.0, 2.0, 3.0, 4.0], [1.0, 1.0, 1.0, 1.0])
    array([2., 3., 4., 5.])
"""

import numpy as np

from seqops.core.types import FloatSequence, as_destination, as_scalar, as_source
from seqops.ops.lengths import check_lengths

__all__ = [
    "add",
    "add_to",
    "add_const",
    "sub",
    "sub_to",
    "mul",
    "mul_to",
    "scale",
    "add_scaled",
]


def add(dst: np.ndarray, src: FloatSequence) -> None:
    """Add ``src`` to ``dst`` element-wise, in place.

    Args:
        dst: Destination array, overwritten with ``dst + src``.
        src: Sequence of the same length as ``dst``.

    Raises:
        LengthMismatch: If the lengths differ.
    """
    dst = as_destination(dst)
    src = as_source(src)
    check_lengths("add", dst, src)
    np.add(dst, src, out=dst)


def add_to(dst: np.ndarray, a: FloatSequence, b: FloatSequence) -> np.ndarray:
    """Store ``a + b`` in ``dst`` and return ``dst``.

    ``a`` and ``b`` are not modified unless one of them is ``dst`` itself.

    Raises:
        LengthMismatch: If ``dst``, ``a`` and ``b`` are not all the same length.
    """
    dst = as_destination(dst)
    a = as_source(a)
    b = as_source(b)
    check_lengths("add_to", dst, a, b)
    return np.add(a, b, out=dst)


def add_const(c: float, s: np.ndarray) -> None:
    """Add the constant ``c`` to every element of ``s``, in place.

    Raises:
        ValueError: If ``c`` is not a scalar.
    """
    c = as_scalar(c)
    s = as_destination(s)
    np.add(s, c, out=s)


def sub(dst: np.ndarray, src: FloatSequence) -> None:
    """Subtract ``src`` from ``dst`` element-wise, in place."""
    dst = as_destination(dst)
    src = as_source(src)
    check_lengths("sub", dst, src)
    np.subtract(dst, src, out=dst)


def sub_to(dst: np.ndarray, a: FloatSequence, b: FloatSequence) -> np.ndarray:
    """Store ``a - b`` in ``dst`` and return ``dst``."""
    dst = as_destination(dst)
    a = as_source(a)
    b = as_source(b)
    check_lengths("sub_to", dst, a, b)
    return np.subtract(a, b, out=dst)


def mul(dst: np.ndarray, src: FloatSequence) -> None:
    """Multiply ``dst`` by ``src`` element-wise, in place."""
    dst = as_destination(dst)
    src = as_source(src)
    check_lengths("mul", dst, src)
    np.multiply(dst, src, out=dst)


def mul_to(dst: np.ndarray, a: FloatSequence, b: FloatSequence) -> np.ndarray:
    """Store ``a * b`` in ``dst`` and return ``dst``."""
    dst = as_destination(dst)
    a = as_source(a)
    b = as_source(b)
    check_lengths("mul_to", dst, a, b)
    return np.multiply(a, b, out=dst)


def scale(c: float, s: np.ndarray) -> None:
    """Multiply every element of ``s`` by ``c``, in place."""
    c = as_scalar(c)
    s = as_destination(s)
    np.multiply(s, c, out=s)


def add_scaled(dst: np.ndarray, alpha: float, src: FloatSequence) -> None:
    """Compute ``dst += alpha * src`` in place.

    Raises:
        LengthMismatch: If the lengths differ.
        ValueError: If ``alpha`` is not a scalar.
    """
    alpha = as_scalar(alpha)
    dst = as_destination(dst)
    src = as_source(src)
    check_lengths("add_scaled", dst, src)
    # The product is materialised first so dst may alias src.
    np.add(dst, alpha * src, out=dst)
