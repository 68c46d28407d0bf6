"""
Logger configuration.

Configures the root logger once per process with an ISO timestamp format
on stdout and quiets chatty third-party loggers.

Dependencies: logging (stdlib), backend.configs
System role: Centralized logging configuration
"""

import logging
import sys

from backend.configs import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

NOISY_LOGGERS = ("httpx", "httpcore", "urllib3", "sqlalchemy.engine", "google_genai")


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure Python logging with ISO timestamps.

    Args:
        level: Root log level; defaults to LOG_LEVEL from settings
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

