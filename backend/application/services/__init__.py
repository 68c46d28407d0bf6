"""Service orchestrators."""

from .analysis_service import AnalysisService
from .chat_service import ChatService
from .file_service import FileService
from .ingestion_service import IngestionService
from .retrieval_service import AssembledContext, RetrievalService

__all__ = [
    "AnalysisService",
    "AssembledContext",
    "ChatService",
    "FileService",
    "IngestionService",
    "RetrievalService",
]
