"""Reductions of a sequence to a single float."""

import numpy as np

from seqops.core.types import FloatSequence, as_source
from seqops.ops.lengths import check_lengths

# ``sum`` is left out of ``__all__`` so star imports keep the builtin.
__all__ = ["prod", "dot"]


def sum(s: FloatSequence) -> float:
    """Sum of the elements of ``s``. The empty sum is 0.0."""
    return float(np.sum(as_source(s)))


def prod(s: FloatSequence) -> float:
    """Product of the elements of ``s``. The empty product is 1.0."""
    return float(np.prod(as_source(s)))


def dot(a: FloatSequence, b: FloatSequence) -> float:
    """Inner product of ``a`` and ``b``.

    Raises:
        LengthMismatch: If the lengths differ.
    """
    a = as_source(a)
    b = as_source(b)
    check_lengths("dot", a, b)
    return float(np.dot(a, b))
