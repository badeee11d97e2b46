# cli/config.py

"""
Runtime configuration for Tuthub.

Settings come from environment variables so the CLI itself takes no arguments:
    - TUTHUB_DATA_PATH: path of the JSON data file (default: ~/Documents/Tuthub/tuthub.json)
    - TUTHUB_LOG_LEVEL: standard logging level name (default: WARNING)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from cli.path_utils import resolve_data_path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_DATA_PATH = "TUTHUB_DATA_PATH"
ENV_LOG_LEVEL = "TUTHUB_LOG_LEVEL"


@dataclass(frozen=True)
class TuthubConfig:
    """
    Configuration for a Tuthub session (immutable).

    Attributes:
        data_path: Absolute path of the JSON data file.
        log_level: Logging level name, one of `LOG_LEVELS`.
    """

    data_path: str
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TuthubConfig:
        """
        Builds a config from environment variables.

        Raises:
            ValueError: If TUTHUB_LOG_LEVEL names an unknown level.
        """
        environ = os.environ if environ is None else environ

        return cls(
            data_path=resolve_data_path(environ.get(ENV_DATA_PATH)),
            log_level=environ.get(ENV_LOG_LEVEL, "WARNING").strip().upper(),
        )
