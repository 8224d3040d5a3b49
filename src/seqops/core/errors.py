"""Exceptions raised by seqops operations."""

__all__ = ["LengthMismatch"]


class LengthMismatch(ValueError):
    """Raised when sequences that must share a length do not.

    Operations raise this before writing anything, so every argument is left
    exactly as it was passed in.

    Attributes:
        operation: Name of the operation that rejected its inputs.
        lengths: Observed lengths, in argument order.
    """

    def __init__(self, operation: str, lengths: tuple[int, ...]):
        self.operation = operation
        self.lengths = tuple(lengths)
        super().__init__(
            f"{operation}: sequences must have equal lengths, got {list(self.lengths)}."
        )
