"""Global logger configuration for the seqops package.

Operations only log at DEBUG: ``check_lengths`` reports the lengths it
rejected just before raising ``LengthMismatch``, and ``filter`` reports how
many elements it kept. Set ``SEQOPS_LOG_LEVEL=DEBUG`` to see them.
"""

import logging
import sys

from seqops.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "seqops",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
            the level in :data:`seqops.core.config.settings`.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Default logger instance for the package
logger = setup_logger()
