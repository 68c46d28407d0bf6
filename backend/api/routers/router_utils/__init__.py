"""Shared router helpers."""

from .error_handling import error_detail, handle_service_errors

__all__ = ["error_detail", "handle_service_errors"]
