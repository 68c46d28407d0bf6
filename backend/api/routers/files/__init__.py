"""
Files router package.

Exports the router for file registration, chunk search and context endpoints.
"""

from .files_router import router

__all__ = ["router"]
