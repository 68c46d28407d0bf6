"""
Router error handling utilities.

Maps the application exception hierarchy onto HTTP responses so every
endpoint reports errors the same way.

Dependencies: fastapi, backend.core.exceptions, backend.models.common
System role: Exception to HTTP status translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    AnalysisError,
    DocumentNotFoundError,
    StudyAssistantException,
    ValidationError,
)
from backend.models.common import ErrorResponse

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def error_detail(exc: StudyAssistantException) -> dict:
    """Render an application exception as an ErrorResponse payload."""
    return ErrorResponse(error=exc.message, details=exc.details or None).model_dump()


def handle_service_errors(func: F) -> F:
    """
    Decorator translating service exceptions into HTTPExceptions.

    - ValidationError -> 400
    - DocumentNotFoundError -> 404
    - AnalysisError -> 500 with the model error in details
    - any other exception -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning(
                f"{__name__}:{func.__name__} - Invalid request",
                extra={"error": str(e)},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_detail(e))

        except DocumentNotFoundError as e:
            logger.warning(
                f"{__name__}:{func.__name__} - Resource not found",
                extra={"error": str(e)},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error_detail(e))

        except AnalysisError as e:
            logger.error(
                f"{__name__}:{func.__name__} - Analysis failed",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=error_detail(e),
            )

        except Exception as e:
            logger.exception(
                f"{__name__}:{func.__name__} - Unexpected failure",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=ErrorResponse(
                    error="Internal server error",
                    details={"error_type": type(e).__name__},
                ).model_dump(),
            )

    return wrapper  # type: ignore
