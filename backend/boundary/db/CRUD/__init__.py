"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import file_crud, document_chunk_crud

    # Use singleton instances
    file = await file_crud.get_by_id(db, file_id)
    chunks = await document_chunk_crud.list_by_file(db, file_id, contains="derivative")
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.file_crud import FileCRUD, file_crud
from backend.boundary.db.CRUD.document_chunk_crud import DocumentChunkCRUD, document_chunk_crud
from backend.boundary.db.CRUD.analysis_result_crud import (
    AnalysisResultCRUD,
    analysis_result_crud,
)

__all__ = [
    "BaseCRUD",
    "FileCRUD",
    "file_crud",
    "DocumentChunkCRUD",
    "document_chunk_crud",
    "AnalysisResultCRUD",
    "analysis_result_crud",
]
