"""
File API endpoints.

Routes:
- POST /files - Register file and ingest its extracted text
- GET /files - List files, newest first
- GET /files/{id} - Get single file
- DELETE /files/{id} - Delete file with its chunks and cached analyses
- GET /files/{id}/chunks - Chunks matching a query
- GET /files/{id}/context - Assembled prompt context for a query

Dependencies: backend.application.services, backend.models
System role: File management and retrieval HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from backend.api.deps.dependencies import get_file_service, get_retrieval_service
from backend.application.services.file_service import FileService
from backend.application.services.retrieval_service import RetrievalService
from backend.models.common import ErrorResponse
from backend.models.file import FileCreateRequest, FileCreateResponse, FileListResponse, FileResponse
from backend.models.retrieval import ChunkSearchResponse, ContextResponse

from ..router_utils import handle_service_errors
from .file_responses import (
    map_chunk_search,
    map_context,
    map_created_file,
    map_file_to_response,
    map_files_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files", tags=["files"])

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.post("", response_model=FileCreateResponse, status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_file(
    request: FileCreateRequest,
    file_service: FileService = Depends(get_file_service),
) -> FileCreateResponse:
    """
    Register a file and chunk its extracted text.

    Ingestion problems never fail the request; they are reported in the
    `ingestion` summary.

    Args:
        request: File metadata and optional extracted text
        file_service: Injected FileService

    Returns:
        FileCreateResponse: Created file with ingestion summary
    """
    file, ingestion = await file_service.create_file(
        name=request.name,
        type=request.type,
        size=request.size,
        extracted_text=request.extracted_text,
        subject=request.subject,
        tags=request.tags,
    )
    return map_created_file(file, ingestion)


@router.get("", response_model=FileListResponse)
@handle_service_errors
async def list_files(
    limit: int | None = Query(default=None, ge=1),
    file_service: FileService = Depends(get_file_service),
) -> FileListResponse:
    """List files, newest first."""
    files = await file_service.list_files(limit=limit)
    return map_files_to_response(files)


@router.get("/{file_id}", response_model=FileResponse, responses=NOT_FOUND)
@handle_service_errors
async def get_file(
    file_id: UUID,
    file_service: FileService = Depends(get_file_service),
) -> FileResponse:
    """Get file by ID."""
    file = await file_service.get_file(file_id)
    return map_file_to_response(file)


@router.delete("/{file_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
@handle_service_errors
async def delete_file(
    file_id: UUID,
    file_service: FileService = Depends(get_file_service),
) -> None:
    """
    Delete file by ID together with its chunks.

    Raises:
        HTTPException(404): File not found
    """
    await file_service.delete_file(file_id)


@router.get("/{file_id}/chunks", response_model=ChunkSearchResponse)
@handle_service_errors
async def search_chunks(
    file_id: UUID,
    query: str | None = None,
    limit: int | None = Query(default=None, ge=0, le=100),
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> ChunkSearchResponse:
    """
    Chunks of a file containing the query, in index order.

    Falls back to the first chunks of the file when nothing matches or the
    store fails; `degraded` and `cause` say which happened.
    """
    result = await retrieval_service.search_chunks(file_id, query, limit)
    return map_chunk_search(result)


@router.get("/{file_id}/context", response_model=ContextResponse)
@handle_service_errors
async def get_context(
    file_id: UUID,
    query: str | None = None,
    limit: int | None = Query(default=None, ge=0, le=100),
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> ContextResponse:
    """Retrieved chunks joined into the context string used in prompts."""
    assembled = await retrieval_service.build_context(file_id, query, limit)
    return map_context(assembled)
