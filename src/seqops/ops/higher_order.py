"""Filtering and folding with caller-supplied functions.

The callables receive plain Python floats and are invoked strictly in the
order documented for each operation, exactly once per element. They may
carry their own state between calls (a closure tracking a running maximum,
for instance), but they must not modify the sequence being traversed.

Examples:
    Keep only the elements of a strictly increasing subsequence::

        import math
        from seqops.ops import filter

        running_max = -math.inf

        def increasing(x):
            global running_max
            if x > running_max:
                running_max = x
                return True
            return False

        dst, n = filter(increasing, [1.0, 3.0, 2.0, 6.0, 5.0])
        # dst == [1., 3., 6.], n == 3

    Folds with an order-sensitive combining function::

        def f(a, b):
            return a * b if a < b else a - b

        fold_left(f, [9.0, -2.0, 21.0, 4.0], 5.0)   # 22.0
        fold_right(f, [9.0, -2.0, 21.0, 4.0], 5.0)  # 11.0
"""

import numpy as np

from seqops.core.types import Combine, FloatSequence, Predicate, as_source
from seqops.logger.logger import logger

# ``filter`` is left out of ``__all__`` so star imports keep the builtin.
__all__ = ["count", "fold_left", "fold_right"]


def filter(
    predicate: Predicate, src: FloatSequence, initial_capacity_hint: int = -1
) -> tuple[np.ndarray, int]:
    """Select the elements of ``src`` for which ``predicate`` is true.

    Args:
        predicate: Called once per element, left to right.
        src: Input sequence, never modified.
        initial_capacity_hint: Expected number of kept elements. A negative
            value means unknown, in which case the buffer is sized to hold
            every element. A hint that turns out too small is grown as needed,
            and one larger than ``len(src)`` is capped at ``len(src)``.

    Returns:
        A tuple ``(dst, n)`` where ``dst`` is a new float64 array of the kept
        elements in their original order and ``n == len(dst)``.

    Raises:
        TypeError: If ``initial_capacity_hint`` is not an integer.
    """
    if not isinstance(initial_capacity_hint, (int, np.integer)):
        raise TypeError(
            "initial_capacity_hint must be an integer, "
            f"got {type(initial_capacity_hint).__name__}."
        )

    values = as_source(src)
    if initial_capacity_hint < 0:
        capacity = len(values)
    else:
        # The result can never outgrow the source.
        capacity = min(int(initial_capacity_hint), len(values))
    buffer = np.empty(capacity, dtype=np.float64)
    n = 0

    for value in values.tolist():
        if not predicate(value):
            continue
        if n == buffer.shape[0]:
            grown = np.empty(max(1, 2 * n), dtype=np.float64)
            grown[:n] = buffer[:n]
            buffer = grown
        buffer[n] = value
        n += 1

    logger.debug(f"filter kept {n} of {len(values)} elements")

    if n == buffer.shape[0]:
        return buffer, n
    return buffer[:n].copy(), n


def count(predicate: Predicate, s: FloatSequence) -> int:
    """Number of elements of ``s`` for which ``predicate`` is true.

    The predicate is evaluated under the same rules as :func:`filter`.
    """
    n = 0
    for value in as_source(s).tolist():
        if predicate(value):
            n += 1
    return n


def fold_left(combine: Combine, src: FloatSequence, initial: float) -> float:
    """Reduce ``src`` from the left.

    Computes ``combine(...combine(combine(initial, src[0]), src[1])..., src[n-1])``,
    i.e. the accumulator is the first argument of ``combine``.

    Returns:
        The final accumulator, or ``initial`` for an empty sequence.
    """
    acc = initial
    for value in as_source(src).tolist():
        acc = combine(acc, value)
    return float(acc)


def fold_right(combine: Combine, src: FloatSequence, initial: float) -> float:
    """Reduce ``src`` from the right.

    Computes ``combine(src[0], combine(src[1], ... combine(src[n-1], initial)))``.
    Elements are visited from the last to the first and the accumulator is the
    second argument of ``combine``.

    Returns:
        The final accumulator, or ``initial`` for an empty sequence.
    """
    acc = initial
    for value in reversed(as_source(src).tolist()):
        acc = combine(value, acc)
    return float(acc)
