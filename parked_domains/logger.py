# === FILE: parked_domains/logger.py ===
"""Logging setup for **ParkedDomains**.

Every module logs through one named logger::

    from parked_domains.logger import logger
    logger.warning("Error loading URL: %s", url)

Records go to standard output, next to the JSON result, so the default level
is ``ERROR``; ``-verbose`` lowers it to ``DEBUG``. ``--log-file`` adds a
rotating file copy.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "ParkedDomains"


def configure(level: Union[int, str] = "ERROR", log_file: str | Path | None = None) -> logging.Logger:
    """Drop the current handlers of the project logger and install fresh ones."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["LOGGER_NAME", "configure", "logger"]
