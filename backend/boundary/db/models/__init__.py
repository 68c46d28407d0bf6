"""
Database models package.

Exports:
  - FileModel, FileStatus: Uploaded file ORM model and status enum
  - DocumentChunkModel: Chunk ORM model
  - AnalysisResultModel, AnalysisAction: Cached analysis output and action enum

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from backend.boundary.db.models.file_model import FileModel, FileStatus
from backend.boundary.db.models.document_chunk_model import DocumentChunkModel
from backend.boundary.db.models.analysis_result_model import (
    AnalysisAction,
    AnalysisResultModel,
)

__all__ = [
    "FileModel",
    "FileStatus",
    "DocumentChunkModel",
    "AnalysisResultModel",
    "AnalysisAction",
]
