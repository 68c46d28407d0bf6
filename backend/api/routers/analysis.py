"""
Analysis API endpoints.

Routes:
- POST /analysis - Generate quiz, flashcards or a tutor answer for a file

Dependencies: backend.application.services.analysis_service, backend.models
System role: Study material generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import get_analysis_service
from backend.application.services.analysis_service import AnalysisService
from backend.models.analysis import AnalysisRequest, AnalysisResponse
from backend.models.common import ErrorResponse

from .router_utils import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post(
    "",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@handle_service_errors
async def analyze_document(
    request: AnalysisRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisResponse:
    """
    Generate study material for a file.

    Quiz and flashcard results are cached per file and model; chat answers
    use the chunks matching the query as context.

    Args:
        request: AnalysisRequest with file, action, query and model
        analysis_service: Injected AnalysisService

    Returns:
        AnalysisResponse: Generated or cached analysis

    Raises:
        HTTPException(400): Unknown action or model, missing file name
        HTTPException(500): Model call failed
    """
    return await analysis_service.analyze(
        file_name=request.file_name,
        action=request.action,
        file_id=request.file_id,
        query=request.query,
        model=request.model,
    )
