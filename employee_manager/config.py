# config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from employee_manager.exceptions import ConfigError

DEFAULT_STORAGE_DIR = "employees"
DEFAULT_HEADER_WIDTH = 44
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "INFO"
MIN_HEADER_WIDTH = 10


@dataclass(frozen=True)
class Config:
    """
    Settings for one run of the application.
    Built once at startup and handed to the directory, the app and the screens.
    """
    storage_dir: Path = Path(DEFAULT_STORAGE_DIR)
    header_width: int = DEFAULT_HEADER_WIDTH
    log_dir: Path = Path(DEFAULT_LOG_DIR)
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.header_width < MIN_HEADER_WIDTH:
            raise ConfigError(f"Header width must be at least {MIN_HEADER_WIDTH}, got {self.header_width}.")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"Unknown log level '{self.log_level}'.")

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "Config":
        """
        Reads EMPLOYEE_* variables, after merging a .env file if one exists.
        Already-set environment variables win over the .env file.
        """
        load_dotenv(env_file)

        width_raw = os.getenv("EMPLOYEE_HEADER_WIDTH", str(DEFAULT_HEADER_WIDTH))
        try:
            width = int(width_raw)
        except ValueError:
            raise ConfigError(f"EMPLOYEE_HEADER_WIDTH must be an integer, got '{width_raw}'.")

        return cls(
            storage_dir=Path(os.getenv("EMPLOYEE_DIR", DEFAULT_STORAGE_DIR)),
            header_width=width,
            log_dir=Path(os.getenv("EMPLOYEE_LOG_DIR", DEFAULT_LOG_DIR)),
            log_level=os.getenv("EMPLOYEE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
