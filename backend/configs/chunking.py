"""
Chunking and chunk store configuration settings.

Controls the fixed-size window chunker used for retrieval-augmented prompting
and the chunk store used to persist and look up windows.

Dependencies: pydantic, pydantic_settings
System role: Chunking pipeline and retrieval configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class ChunkingSettings(BaseSettings):
    """Fixed-size window chunker configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHUNKING_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(
        default=1000,
        gt=0,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Characters shared between consecutive chunk windows",
    )
    min_chunk_length: int = Field(
        default=50,
        ge=0,
        description="Windows shorter than this after trimming are discarded",
    )
    insert_batch_size: int = Field(
        default=5,
        gt=0,
        description="Number of chunks written per store batch",
    )

    @model_validator(mode="after")
    def _check_overlap(self) -> "ChunkingSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than "
                f"chunk_size ({self.chunk_size})"
            )
        return self


class ChunkStoreSettings(BaseSettings):
    """Chunk store selection and retrieval behaviour."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHUNK_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="sql",
        description="Chunk store type: 'sql' for the database, 'memory' for local dev",
    )
    retrieval_limit: int = Field(
        default=5,
        gt=0,
        description="Default number of chunks returned per retrieval",
    )
    fallback_on_no_match: bool = Field(
        default=True,
        description="Return positional chunks when the query matches nothing",
    )
    timeout_seconds: float | None = Field(
        default=10.0,
        description="Deadline for a single store call (None disables it)",
    )
