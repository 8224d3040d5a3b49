"""Element-wise arithmetic returning new JAX arrays."""

import jax
import jax.numpy as jnp

from seqops.ops.lengths import check_lengths

__all__ = ["add", "add_const"]


@jax.jit
def add(a: jax.Array, b: jax.Array) -> jax.Array:
    """Element-wise sum of two equal-length sequences.

    Shapes are static under ``jax.jit``, so a length mismatch is reported
    while tracing, before any computation runs.

    Args:
        a: First operand. Shape: ``(n,)``.
        b: Second operand. Shape: ``(n,)``.

    Returns:
        ``a + b`` as a new array.

    Raises:
        LengthMismatch: If ``a`` and ``b`` differ in length.
    """
    a = jnp.asarray(a, dtype=float)
    b = jnp.asarray(b, dtype=float)
    check_lengths("add", a, b)
    return a + b


@jax.jit
def add_const(c: float, s: jax.Array) -> jax.Array:
    """Return ``s`` with the constant ``c`` added to every element."""
    return jnp.asarray(s, dtype=float) + c
