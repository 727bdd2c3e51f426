"""Core constants used across Beth Yw? modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_DIR = Path("datasets")
DATA_DIR_ENV_VAR = "BETHYW_DATA_DIR"
JSON_OUTPUT_ENV_VAR = "BETHYW_JSON"
TRUE_ENV_VALUES = ("1", "true", "yes", "on")
FALSE_ENV_VALUES = ("0", "false", "no", "off")
ENGLISH_LANGUAGE_CODE = "eng"
WELSH_LANGUAGE_CODE = "cym"
LANGUAGE_CODE_PATTERN = r"^[a-zA-Z]{3}$"
UNNAMED_AREA_LABEL = "Unnamed"
NO_AREAS_MARKER = "<no areas>"
NO_MEASURES_MARKER = "<no measures>"
NO_DATA_MARKER = "<no data>"
ALL_FILTER_KEYWORD = "all"
NO_YEAR_FILTER = (0, 0)
YEARS_ARGUMENT_PATTERN = r"^([0-9]{4}|0)(-[0-9]{4}|-0)?$"
CSV_DELIMITER = ","
STATS_JSON_RECORDS_KEY = "value"
TEXT_ENCODING = "utf-8-sig"
LOG_LEVEL_ENV_VAR = "BETHYW_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
