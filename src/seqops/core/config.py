"""Runtime settings for seqops, read from the environment."""

import os

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


class Settings(BaseModel):
    LOG_LEVEL: str = Field(default="INFO", description="Level of the seqops logger.")
    STRICT_DTYPE: bool = Field(
        default=True,
        description="Require float64 destination arrays for in-place operations.",
    )
    JAX_ENABLE_X64: bool = Field(
        default=True,
        description="Switch JAX to 64-bit floats when seqops.functional is imported.",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{value}'.")
        return level

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``SEQOPS_*`` environment variables.

        ``SEQOPS_LOG_LEVEL`` falls back to the generic ``LOG_LEVEL``.
        """
        log_level = os.getenv("SEQOPS_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")

        return cls(
            LOG_LEVEL=log_level,
            STRICT_DTYPE=_env_flag("SEQOPS_STRICT_DTYPE", True),
            JAX_ENABLE_X64=_env_flag("SEQOPS_JAX_ENABLE_X64", True),
        )


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default

    flag = raw.strip().lower()
    if flag not in _TRUTHY | _FALSY:
        raise ValueError(f"{name} must be a boolean flag, got '{raw}'.")
    return flag in _TRUTHY


settings = Settings.load()
