"""
Core business logic module.

Contains the exception hierarchy, the Ok/Degraded result type, chunking,
retrieval and analysis prompt construction. Subpackages are imported
explicitly by callers.
"""

from backend.core.exceptions import (
    AnalysisError,
    ChunkStoreError,
    DocumentNotFoundError,
    StudyAssistantException,
    ValidationError,
)
from backend.core.result import Degraded, Ok, Result

__all__ = [
    # Exceptions
    "StudyAssistantException",
    "ValidationError",
    "DocumentNotFoundError",
    "ChunkStoreError",
    "AnalysisError",
    # Results
    "Ok",
    "Degraded",
    "Result",
]
