"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from backend.configs.base import AppSettings
from backend.configs.chunking import ChunkingSettings, ChunkStoreSettings
from backend.configs.database import DatabaseSettings
from backend.configs.llm import LLMSettings, ModelOption
from backend.configs.settings import Settings, get_settings

__all__ = [
    "AppSettings",
    "Settings",
    "get_settings",
    "ChunkingSettings",
    "ChunkStoreSettings",
    "DatabaseSettings",
    "LLMSettings",
    "ModelOption",
]
