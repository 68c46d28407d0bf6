"""
Exception hierarchy for the StudyBuddy backend.

Only faults a caller has to act on are exceptions. Chunker fallbacks,
partial inserts and retrieval fallbacks are reported through the Ok and
Degraded result types instead.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StudyAssistantException(Exception):
    """Base exception for all StudyBuddy application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Context returned to API clients and attached to logs
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(StudyAssistantException):
    """Raised when a caller passes input that can never succeed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Name of the rejected argument or request field
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentNotFoundError(StudyAssistantException):
    """Raised when a file record cannot be found."""

    def __init__(self, document_id: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["document_id"] = document_id
        super().__init__(f"Document not found: {document_id}", details)


class ChunkStoreError(StudyAssistantException):
    """Raised when a chunk store call fails or misses its deadline."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize chunk store error.

        Args:
            message: Error message
            operation: insert, list or delete
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class AnalysisError(StudyAssistantException):
    """Raised when the language model fails to produce an analysis."""

    pass
