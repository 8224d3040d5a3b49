"""Mutable sequence operations on NumPy float64 arrays.

In-place operations overwrite their destination argument; everything else
reads its inputs and returns a new value. Operations over several sequences
raise :class:`seqops.core.errors.LengthMismatch` before writing anything when
the lengths disagree.

``filter`` and ``sum`` are importable by name but left out of ``__all__``.
"""

from seqops.ops.arith import (
    add,
    add_const,
    add_scaled,
    add_to,
    mul,
    mul_to,
    scale,
    sub,
    sub_to,
)
from seqops.ops.cumulative import cum_prod, cum_sum
from seqops.ops.higher_order import count, filter, fold_left, fold_right
from seqops.ops.lengths import equal_lengths
from seqops.ops.reduce import dot, prod, sum

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
    "cum_sum",
    "cum_prod",
    "equal_lengths",
    "count",
    "fold_left",
    "fold_right",
    "prod",
    "dot",
]
