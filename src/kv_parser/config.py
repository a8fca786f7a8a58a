"""Runtime configuration for the key-value parser."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_DELIMITER = "="
ALL_TOKEN = "--all"
DEFAULT_LOG_LEVEL = "WARNING"

_ENV_DELIMITER = "KV_PARSER_DELIMITER"
_ENV_LOG_LEVEL = "KV_PARSER_LOG_LEVEL"


def validate_delimiter(delimiter: str) -> str:
    """Return *delimiter* if it can separate keys from values.

    Raises:
        ConfigError: unless *delimiter* is a single character other than a
            line terminator.
    """
    if len(delimiter) != 1:
        raise ConfigError(f"delimiter must be a single character, got {delimiter!r}")
    if delimiter in "\r\n":
        raise ConfigError(f"delimiter cannot be a line terminator, got {delimiter!r}")
    return delimiter


@dataclass
class ParserConfig:
    """Configuration knobs for parsing and querying.

    Parameters
    ----------
    delimiter : str
        Single character separating a key from its value.
    all_token : str
        Query argument that requests the full listing.
    log_level : str
        Level name for the structured event logger (``"DEBUG"``,
        ``"INFO"``, ...).  Defaults to ``WARNING`` so that routine events
        stay off stderr.
    """

    delimiter: str = DEFAULT_DELIMITER
    all_token: str = ALL_TOKEN
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        validate_delimiter(self.delimiter)
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"unknown log level: {self.log_level!r}")
        self.log_level = level

    @property
    def log_level_value(self) -> int:
        """Numeric :mod:`logging` level for :attr:`log_level`."""
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParserConfig":
        """Build a config from ``KV_PARSER_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            delimiter=env.get(_ENV_DELIMITER, DEFAULT_DELIMITER),
            log_level=env.get(_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        )
