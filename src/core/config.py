"""Runtime configuration model for Beth Yw?.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DATA_DIR_ENV_VAR,
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    FALSE_ENV_VALUES,
    JSON_OUTPUT_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
    TRUE_ENV_VALUES,
)
from core.errors import BethYwConfigError


@dataclass(frozen=True)
class BethYwConfig:
    """Validated runtime configuration.

    Attributes:
        data_dir: Directory holding areas.csv and the dataset files.
        json_output: Print JSON instead of text tables by default.
        log_level: Minimum structured log level written to stderr.
    """

    data_dir: Path
    json_output: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "BethYwConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            BethYwConfigError: If environment values are invalid.
        """
        data_dir_value = os.getenv(DATA_DIR_ENV_VAR, str(DEFAULT_DATA_DIR))
        json_output_value = os.getenv(JSON_OUTPUT_ENV_VAR, "0")
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(
            data_dir=Path(data_dir_value).expanduser().resolve(),
            json_output=_parse_flag(JSON_OUTPUT_ENV_VAR, json_output_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_flag(name: str, raw_value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        name: Environment variable name, for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean flag.

    Raises:
        BethYwConfigError: If value is not a recognized boolean word.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUE_ENV_VALUES:
        return True
    if normalized in FALSE_ENV_VALUES:
        return False
    raise BethYwConfigError(
        f"Invalid {name} value: expected one of "
        f"{TRUE_ENV_VALUES + FALSE_ENV_VALUES}, got '{raw_value}'. "
        f"Set {name} to a boolean word."
    )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Lower-cased level name.

    Raises:
        BethYwConfigError: If the level name is unknown.
    """
    normalized = raw_value.strip().lower()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise BethYwConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: expected one of "
            f"{SUPPORTED_LOG_LEVELS}, got '{raw_value}'."
        )
    return normalized
