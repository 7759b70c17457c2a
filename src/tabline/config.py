"""Application configuration from defaults, environment and CLI options."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

ENV_TITLE = "TABLINE_TITLE"
ENV_LOG_FILE = "TABLINE_LOG_FILE"
ENV_LOG_LEVEL = "TABLINE_LOG_LEVEL"


@dataclass(frozen=True)
class AppConfig:
    """
    Runtime settings.

    Attributes:
        title: Text shown on the right of the tab bar
        log_file: Where to write logs; None disables logging
        log_level: One of LOG_LEVELS (case-insensitive)
    """
    title: str = "tabline"
    log_file: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level!r} (expected one of {', '.join(LOG_LEVELS)})"
            )
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(
        cls,
        title: Optional[str] = None,
        log_file: Optional[Path] = None,
        log_level: Optional[str] = None,
    ) -> AppConfig:
        """
        Build a config from TABLINE_* environment variables.

        Non-None arguments take precedence over the environment. Values
        are validated once, after the override, so a bad environment
        value that is overridden is never rejected.
        """
        defaults = cls()
        env_log_file = os.environ.get(ENV_LOG_FILE)
        if log_file is None and env_log_file:
            log_file = Path(env_log_file).expanduser()
        return cls(
            title=title if title is not None else os.environ.get(ENV_TITLE, defaults.title),
            log_file=log_file,
            log_level=log_level if log_level is not None else os.environ.get(ENV_LOG_LEVEL, defaults.log_level),
        )
