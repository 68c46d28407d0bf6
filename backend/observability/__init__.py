"""
Observability module.

Provides logging configuration, safe structured logging helpers and
request logging middleware.
"""

from backend.observability.log_utils import (
    log_exception_with_context,
    log_result,
    log_with_context,
    safe_log_value,
)
from backend.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "log_exception_with_context",
    "log_result",
    "log_with_context",
    "safe_log_value",
]
