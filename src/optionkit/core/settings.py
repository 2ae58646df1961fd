"""Logging configuration read with Pydantic Settings (v2).

The option core has nothing to configure. The adapters and the CLI only
need a log level, read from:
- Real environment variables (highest precedence)
- `.env` files in the working directory: .env, .env.local
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    log_level : LogLevelName
        Level applied by :func:`get_logger`; maps from `LOG_LEVEL`.
    """

    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    return Settings()


def get_logger(name: str = "optionkit") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`.

    Adapters log misses at DEBUG; set `LOG_LEVEL=DEBUG` to see them.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
