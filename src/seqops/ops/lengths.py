"""Length guards for operations that combine several sequences."""

from typing import Sized

from seqops.core.errors import LengthMismatch
from seqops.logger.logger import logger

__all__ = ["equal_lengths", "check_lengths"]


def equal_lengths(*seqs: Sized) -> bool:
    """Return True if every sequence passed has the same length.

    Use it as a guard before calling a length-sensitive operation. With zero
    or one argument the answer is trivially True.

    Example:
        >>> equal_lengths([1.0, 2.0, 3.0], [5.0, 6.0, 7.0, 8.0])
        False
    """
    if len(seqs) < 2:
        return True
    first = len(seqs[0])
    return all(len(s) == first for s in seqs[1:])


def check_lengths(operation: str, *seqs: Sized) -> int:
    """Raise :class:`LengthMismatch` unless all ``seqs`` share a length.

    Args:
        operation: Name reported in the error.
        *seqs: Sequences to compare.

    Returns:
        The common length.
    """
    if not equal_lengths(*seqs):
        lengths = tuple(len(s) for s in seqs)
        logger.debug(f"{operation} rejected sequences with lengths {lengths}")
        raise LengthMismatch(operation, lengths)
    return len(seqs[0]) if seqs else 0
