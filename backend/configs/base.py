"""
Base configuration settings.

`BaseSettings` carries the .env loading every settings group shares.
`AppSettings` holds what the API process itself needs: its name, runtime
mode, log level, bind address and the browser origins allowed to call it.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Env-file loading shared by every settings group."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """API process settings."""

    app_name: str = Field(
        default="StudyBuddy API",
        description="Application name reported by the API",
    )
    environment: str = Field(
        default="development",
        description="development, staging or production",
    )
    debug: bool = Field(default=False, description="FastAPI debug mode")
    log_level: str = Field(default="INFO", description="Root log level name")
    host: str = Field(default="0.0.0.0", description="Bind address for uvicorn")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port for uvicorn")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description='Origins allowed by CORS, e.g. CORS_ORIGINS=["http://localhost:3000"]',
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()
