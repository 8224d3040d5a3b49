"""Functional primitives for seqops.

Pure JAX counterparts of the in-place operations in :mod:`seqops.ops`. Nothing
here mutates its inputs; every function returns a new array or scalar and can
be composed under ``jax.jit``, ``jax.vmap`` or ``jax.grad``.

Importing this package switches JAX to 64-bit floats unless
``SEQOPS_JAX_ENABLE_X64`` is turned off.
"""

import jax

from seqops.core.config import settings

if settings.JAX_ENABLE_X64:
    jax.config.update("jax_enable_x64", True)

from seqops.functional.elementwise import add, add_const  # noqa: E402
from seqops.functional.scan import cum_prod, cum_sum, fold_left, fold_right  # noqa: E402

__all__ = [
    "add",
    "add_const",
    "cum_sum",
    "cum_prod",
    "fold_left",
    "fold_right",
]
