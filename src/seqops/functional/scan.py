"""Cumulative operations and folds built on ``jax.lax.scan``.

The fold functions take the combining function as a static argument, so it
must be hashable and traceable: use ``jnp.where`` instead of Python ``if``
on array values.

Example:
    >>> import jax.numpy as jnp
    >>> from seqops.functional import fold_left, fold_right
    >>>
    >>> def f(a, b):
    ...     return jnp.where(a < b, a * b, a - b)
    >>>
    >>> s = jnp.array([9.0, -2.0, 21.0, 4.0])
    >>> fold_left(f, s, 5.0)   # 22.0
    >>> fold_right(f, s, 5.0)  # 11.0

See Also:
    - :mod:`seqops.ops.higher_order`: Eager versions that accept any Python
      callable.
"""

from functools import partial

import jax
import jax.numpy as jnp

from seqops.core.types import Combine

__all__ = ["cum_sum", "cum_prod", "fold_left", "fold_right"]


@jax.jit
def cum_sum(src: jax.Array) -> jax.Array:
    """Running sum: ``out[i] = src[0] + ... + src[i]``."""
    return jnp.cumsum(jnp.asarray(src, dtype=float))


@jax.jit
def cum_prod(src: jax.Array) -> jax.Array:
    """Running product: ``out[i] = src[0] * ... * src[i]``."""
    return jnp.cumprod(jnp.asarray(src, dtype=float))


@partial(jax.jit, static_argnames=["combine"])
def fold_left(combine: Combine, src: jax.Array, initial: float) -> jax.Array:
    """Left fold, ``combine(acc, x)`` applied from the first element to the last.

    Args:
        combine: Traceable ``(acc, x) -> acc`` function.
        src: Sequence to reduce. Shape: ``(n,)``.
        initial: Starting accumulator.

    Returns:
        Scalar array holding the final accumulator. ``initial`` when ``src``
        is empty.
    """
    src = jnp.asarray(src, dtype=float)

    def step(acc, x):
        return combine(acc, x), None

    acc, _ = jax.lax.scan(step, jnp.asarray(initial, dtype=src.dtype), src)
    return acc


@partial(jax.jit, static_argnames=["combine"])
def fold_right(combine: Combine, src: jax.Array, initial: float) -> jax.Array:
    """Right fold, ``combine(x, acc)`` applied from the last element to the first.

    Args:
        combine: Traceable ``(x, acc) -> acc`` function.
        src: Sequence to reduce. Shape: ``(n,)``.
        initial: Starting accumulator.

    Returns:
        Scalar array holding the final accumulator. ``initial`` when ``src``
        is empty.
    """
    src = jnp.asarray(src, dtype=float)

    def step(acc, x):
        return combine(x, acc), None

    acc, _ = jax.lax.scan(
        step, jnp.asarray(initial, dtype=src.dtype), src, reverse=True
    )
    return acc
