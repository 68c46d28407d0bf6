"""
Logging utilities for safe structured logging.

Every value passed as context is turned into a short string first, so
logging a document text, a chunk list or an unprintable object can never
raise or flood the log.

Dependencies: logging (stdlib), backend.core.result
System role: Logging helper functions
"""

import logging
from typing import Any

from backend.core.result import Result

MAX_VALUE_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Convert any value to a bounded string for logging.

    Collections are summarised by size instead of being rendered.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            rendered = value
        elif isinstance(value, (list, tuple, set)):
            rendered = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            rendered = f"dict({len(value)} keys)"
        else:
            rendered = str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(rendered) > max_length:
        return f"{rendered[:max_length]}... (truncated, {len(rendered)} total)"
    return rendered


def _safe_context(context: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached as `extra`
    """
    logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with traceback and context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    safe_context = _safe_context(context)
    safe_context["error_type"] = type(exc).__name__
    safe_context["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=safe_context)


def log_result(
    logger: logging.Logger,
    message: str,
    result: Result[Any],
    **context: Any,
) -> None:
    """
    Log an operation outcome: INFO when Ok, WARNING with the cause when Degraded.

    Args:
        logger: Logger instance
        message: Log message
        result: Ok or Degraded outcome
        **context: Additional context
    """
    if not result.is_degraded:
        log_with_context(logger, logging.INFO, message, **context)
        return
    context["cause"] = result.cause
    if result.error is not None:
        context["error_msg"] = str(result.error)
    log_with_context(logger, logging.WARNING, f"{message} (degraded)", **context)
