"""
Runtime settings for fpair.

Settings are read from environment variables into an immutable dataclass.
Parsing returns an Either so callers can inspect a bad value without catching
exceptions; get_settings() is the raising entry point, and settings_or_default()
falls back to the defaults so a bad environment never masks another error.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from fpair.core.combinators import identity
from fpair.core.either import Either, Left, Right
from fpair.errors import ConfigurationError

LOGGER_NAME = "fpair"

ENV_LOG_LEVEL = "FPAIR_LOG_LEVEL"
ENV_LOG_VIOLATIONS = "FPAIR_LOG_VIOLATIONS"


class LogLevel(Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging(self) -> int:
        return getattr(logging, self.value)


@dataclass(frozen=True)
class Settings:
    """Library-wide settings."""

    log_level: LogLevel = LogLevel.WARNING
    log_violations: bool = True

    @classmethod
    def create(cls, log_level: str, log_violations: bool) -> Either[str, "Settings"]:
        """Create settings with validation."""
        if not isinstance(log_level, str):
            return Left(f"Invalid log level: {log_level!r}")
        try:
            level = LogLevel[log_level.strip().upper()]
        except KeyError:
            return Left(f"Invalid log level: {log_level}")

        return Right(cls(log_level=level, log_violations=log_violations))

    @classmethod
    def from_env(cls) -> Either[str, "Settings"]:
        """Load settings from environment variables."""
        return cls.create(
            log_level=parse_env_var(ENV_LOG_LEVEL, LogLevel.WARNING.value) or "",
            log_violations=parse_bool_env(ENV_LOG_VIOLATIONS, default=True),
        )


# Environment variable parsing
def parse_env_var(key: str, default: str | None = None) -> str | None:
    """Parse environment variable with optional default."""
    return os.environ.get(key, default)


def parse_bool_env(key: str, default: bool = False) -> bool:
    """Parse boolean environment variable."""
    value = parse_env_var(key)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


@lru_cache(maxsize=1)
def load_settings() -> Either[str, Settings]:
    """Parse the environment once; the result is cached until reset_settings()."""
    return Settings.from_env()


def get_settings() -> Settings:
    """Return the cached settings, raising ConfigurationError if invalid."""
    return load_settings().either(_raise_configuration_error, identity)


def settings_or_default() -> Settings:
    """Return the cached settings, or Settings() when the environment is invalid."""
    return load_settings().either(lambda _: Settings(), identity)


def reset_settings() -> None:
    """Drop cached settings so the environment is read again."""
    load_settings.cache_clear()


def _raise_configuration_error(message: str) -> Settings:
    raise ConfigurationError(message, context={"source": "environment"})


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the fpair logger.

    A StreamHandler is attached only when the logger has no handler other
    than the NullHandler installed at import time.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level.to_logging())

    if not any(
        not isinstance(handler, logging.NullHandler) for handler in logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)

    logger.debug("fpair logging configured at %s", settings.log_level.value)
    return logger


__all__ = [
    "ENV_LOG_LEVEL",
    "ENV_LOG_VIOLATIONS",
    "LOGGER_NAME",
    "LogLevel",
    "Settings",
    "configure_logging",
    "get_settings",
    "load_settings",
    "parse_bool_env",
    "parse_env_var",
    "reset_settings",
    "settings_or_default",
]
