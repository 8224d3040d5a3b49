"""Type aliases and argument validators shared across seqops.

Type Aliases:
    FloatSequence: Anything accepted as a read-only source sequence.
    Predicate: Boolean-valued function of one float.
    Combine: Two-float-to-one-float function used by folds.

Sources go through :func:`as_source`, which never copies a float64 array, and
destinations through :func:`as_destination`, which refuses anything it could not
write to in place.
"""

from typing import Callable, Sequence, Union

import numpy as np

from seqops.core.config import settings

__all__ = [
    "FloatSequence",
    "Predicate",
    "Combine",
    "as_source",
    "as_destination",
    "as_scalar",
]

FloatSequence = Union[np.ndarray, Sequence[float]]
Predicate = Callable[[float], bool]
Combine = Callable[[float, float], float]


def as_source(values: FloatSequence) -> np.ndarray:
    """Convert ``values`` to a 1-D float64 array for reading.

    Args:
        values: A list, tuple or array of numbers.

    Returns:
        The input itself when it already is a float64 array, otherwise a
        converted copy.

    Raises:
        ValueError: If the input is not one-dimensional.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D sequence, got an array with ndim={arr.ndim}.")
    return arr


def as_destination(values: np.ndarray) -> np.ndarray:
    """Check that ``values`` can be written to in place.

    Args:
        values: The destination array.

    Returns:
        ``values`` unchanged.

    Raises:
        TypeError: If ``values`` is not a writeable ``numpy.ndarray``.
        ValueError: If ``values`` is not 1-D or has the wrong dtype.
    """
    if not isinstance(values, np.ndarray):
        raise TypeError(
            f"Destination must be a numpy.ndarray, got {type(values).__name__}."
        )
    if not values.flags.writeable:
        raise TypeError("Destination array is read-only.")
    if values.ndim != 1:
        raise ValueError(
            f"Destination must be 1-D, got an array with ndim={values.ndim}."
        )

    if settings.STRICT_DTYPE:
        if values.dtype != np.float64:
            raise ValueError(f"Destination must be float64, got {values.dtype}.")
    elif not np.issubdtype(values.dtype, np.floating):
        raise ValueError(f"Destination must be a float array, got {values.dtype}.")
    return values


def as_scalar(value: float) -> float:
    """Convert a constant operand to a Python float.

    Raises:
        ValueError: If ``value`` is an array or sequence rather than a scalar.
    """
    if np.ndim(value) != 0:
        raise ValueError(
            f"Expected a scalar constant, got an array with ndim={np.ndim(value)}."
        )
    return float(value)

