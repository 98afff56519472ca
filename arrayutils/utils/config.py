"""Configuration utilities."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

_FALSEY = {"0", "false", "no", "off"}

LOGGER_NAME = "arrayutils"


@dataclass(slots=True)
class ArrayUtilsConfig:
    log_level: str = "WARNING"
    validate_callables: bool = True

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {self.log_level}"
            raise ValueError(msg)
        self.log_level = level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ArrayUtilsConfig:
        """Build a config from ``ARRAYUTILS_*`` environment variables."""
        env = os.environ if environ is None else environ
        validate = env.get("ARRAYUTILS_VALIDATE", "1").strip().lower() not in _FALSEY
        return cls(
            log_level=env.get("ARRAYUTILS_LOG_LEVEL", "WARNING"),
            validate_callables=validate,
        )

    def as_dict(self) -> dict[str, str | bool]:
        return {
            "log_level": self.log_level,
            "validate_callables": self.validate_callables,
        }


_ACTIVE: ArrayUtilsConfig | None = None


def get_config() -> ArrayUtilsConfig:
    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = ArrayUtilsConfig.from_env()
    return _ACTIVE


def set_config(config: ArrayUtilsConfig | None) -> None:
    """Install ``config`` as the active settings; ``None`` re-reads the environment.

    The log level is applied to the package logger straight away; component
    loggers inherit it.
    """
    global _ACTIVE
    _ACTIVE = config
    logging.getLogger(LOGGER_NAME).setLevel(get_config().log_level)
