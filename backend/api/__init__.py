"""
API routes module.

FastAPI routers for all HTTP endpoints, collected under one router.
"""

from fastapi import APIRouter

from .routers import analysis_router, chat_router, files_router, health_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(files_router)
api_router.include_router(analysis_router)
api_router.include_router(chat_router)

__all__ = ["api_router"]
