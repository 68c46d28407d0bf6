"""
Tutor chat API endpoints.

Routes:
- POST /chat - Next tutor reply for a conversation

Dependencies: backend.application.services.chat_service, backend.models
System role: Tutor conversation HTTP API
"""

from fastapi import APIRouter, Depends

from backend.api.deps.dependencies import get_chat_service
from backend.application.services.chat_service import ChatService
from backend.models.chat import ChatRequest, ChatResponse
from backend.models.common import ErrorResponse

from .router_utils import handle_service_errors

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@handle_service_errors
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Continue a tutor conversation.

    Raises:
        HTTPException(400): Last turn is not from the user, unknown model
        HTTPException(500): Model call failed
    """
    return await chat_service.reply(request.messages, model=request.model)
