"""
File response mapping utilities.

Transforms ORM models and service results into Pydantic response models.

Dependencies: backend.models.file, backend.models.retrieval
System role: File response transformation
"""

from collections.abc import Sequence

from backend.application.services.retrieval_service import AssembledContext
from backend.boundary.db.models.file_model import FileModel
from backend.core.result import Result
from backend.models.chunk import IngestionReport
from backend.models.file import (
    FileCreateResponse,
    FileListResponse,
    FileResponse,
    IngestionSummary,
)
from backend.models.retrieval import ChunkSearchResponse, ContextResponse


def map_ingestion_summary(result: Result[IngestionReport] | None) -> IngestionSummary | None:
    """
    Summarise an ingestion result for the API.

    Args:
        result: Ok/Degraded ingestion report, or None when no text was given

    Returns:
        IngestionSummary or None
    """
    if result is None:
        return None
    report = result.data
    return IngestionSummary(
        chunk_count=report.chunk_count,
        stored_count=report.stored_count,
        failed_batches=len(report.failed_batches),
        degraded=result.is_degraded,
        cause=result.cause,
    )


def map_file_to_response(file: FileModel) -> FileResponse:
    return FileResponse.model_validate(file)


def map_created_file(
    file: FileModel,
    ingestion: Result[IngestionReport] | None,
) -> FileCreateResponse:
    return FileCreateResponse(
        **map_file_to_response(file).model_dump(),
        ingestion=map_ingestion_summary(ingestion),
    )


def map_files_to_response(files: Sequence[FileModel]) -> FileListResponse:
    responses = [map_file_to_response(file) for file in files]
    return FileListResponse(files=responses, total=len(responses))


def map_chunk_search(result: Result[list[str]]) -> ChunkSearchResponse:
    return ChunkSearchResponse(
        chunks=result.data,
        degraded=result.is_degraded,
        cause=result.cause,
    )


def map_context(assembled: AssembledContext) -> ContextResponse:
    return ContextResponse(
        context=assembled.context,
        chunk_count=assembled.chunk_count,
        degraded=assembled.degraded,
        cause=assembled.cause,
    )
