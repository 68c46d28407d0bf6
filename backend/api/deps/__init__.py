"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_analysis_service,
    get_file_service,
    get_ingestion_service,
    get_llm_client,
    get_retrieval_service,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_analysis_service",
    "get_file_service",
    "get_ingestion_service",
    "get_llm_client",
    "get_retrieval_service",
    "get_service_cache",
]
