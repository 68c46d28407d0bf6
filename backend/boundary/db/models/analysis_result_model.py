"""
Analysis result ORM model.

Caches generated quizzes and flashcards per file, action and model so
repeat requests skip the language model.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Analysis output cache
"""

import enum
import uuid

from sqlalchemy import Enum, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class AnalysisAction(str, enum.Enum):
    """Kinds of generated study material."""

    QUIZ = "quiz"
    FLASHCARDS = "flashcards"
    CHAT = "chat"


class AnalysisResultModel(Base, UUIDMixin, TimestampMixin):
    """
    Generated analysis text for a file.

    Attributes:
        id: UUID primary key
        file_id: Analysed file (ON DELETE CASCADE)
        action_type: quiz, flashcards or chat
        model_used: Model key that produced the text
        analysis_text: Raw model output
    """

    __tablename__ = "analysis_results"

    file_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("files.id", ondelete="CASCADE"),
        nullable=False,
    )

    action_type: Mapped[AnalysisAction] = mapped_column(
        Enum(AnalysisAction, native_enum=False),
        nullable=False,
    )

    model_used: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    analysis_text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Relationships
    file = relationship("FileModel", back_populates="analysis_results")
