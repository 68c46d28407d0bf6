"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - FileModel, DocumentChunkModel, AnalysisResultModel: Core domain entities
  - FileStatus, AnalysisAction: Enum types for state tracking
  - file_crud, document_chunk_crud, analysis_result_crud: CRUD operation singletons

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing persistent storage for files,
document chunks and cached analysis results.
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models import (
    AnalysisAction,
    AnalysisResultModel,
    DocumentChunkModel,
    FileModel,
    FileStatus,
)
from backend.boundary.db.CRUD import (
    AnalysisResultCRUD,
    BaseCRUD,
    DocumentChunkCRUD,
    FileCRUD,
    analysis_result_crud,
    document_chunk_crud,
    file_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "FileModel",
    "FileStatus",
    "DocumentChunkModel",
    "AnalysisResultModel",
    "AnalysisAction",
    # CRUD classes
    "BaseCRUD",
    "FileCRUD",
    "DocumentChunkCRUD",
    "AnalysisResultCRUD",
    # CRUD singletons
    "file_crud",
    "document_chunk_crud",
    "analysis_result_crud",
]
