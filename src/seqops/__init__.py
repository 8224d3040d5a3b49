"""seqops: numeric operations over sequences of 64-bit floats.

The top-level namespace re-exports the NumPy operations from
:mod:`seqops.ops` together with :class:`LengthMismatch`. JAX counterparts live
in :mod:`seqops.functional` and are not imported here.

``seqops.filter`` and ``seqops.sum`` are available as attributes but are not
in ``__all__``, so ``from seqops import *`` does not shadow the builtins.

Example:
    >>> import numpy as np
    >>> import seqops
    >>>
    >>> s1 = np.array([1.0, 2.0, 3.0])
    >>> s2 = np.array([5.0, 6.0, 7.0, 8.0])
    >>> if seqops.equal_lengths(s1, s2):
    ...     seqops.add(s1, s2)
    ... else:
    ...     print("Unequal lengths")
    Unequal lengths
"""

from seqops.core.errors import LengthMismatch
from seqops.ops import (
    add,
    add_const,
    add_scaled,
    add_to,
    count,
    cum_prod,
    cum_sum,
    dot,
    equal_lengths,
    filter,
    fold_left,
    fold_right,
    mul,
    mul_to,
    prod,
    scale,
    sub,
    sub_to,
    sum,
)

__version__ = "0.1.0"

__all__ = [
    "LengthMismatch",
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
