"""Logging setup. The terminal belongs to the UI, so logs only go to a file."""

from __future__ import annotations

import logging

from tabline.config import AppConfig

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logging(config: AppConfig) -> None:
    """Send logs to config.log_file, or drop ``tabline`` logs if it is unset."""
    if config.log_file is None:
        # Keeps the last-resort stderr handler from writing over the screen
        logging.getLogger("tabline").addHandler(logging.NullHandler())
        return

    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=config.log_file,
        level=getattr(logging, config.log_level),
        format=LOG_FORMAT,
        encoding="utf-8",
        force=True,
    )
