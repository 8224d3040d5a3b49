"""Shared building blocks: errors, settings and argument validators."""

from seqops.core.config import Settings, settings
from seqops.core.errors import LengthMismatch
from seqops.core.types import Combine, FloatSequence, Predicate

__all__ = [
    "LengthMismatch",
    "Settings",
    "settings",
    "FloatSequence",
    "Predicate",
    "Combine",
]
