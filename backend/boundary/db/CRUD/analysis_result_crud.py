"""
Analysis result CRUD operations.

Looks up and stores cached quiz and flashcard output per file.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Analysis cache persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.analysis_result_model import (
    AnalysisAction,
    AnalysisResultModel,
)


class AnalysisResultCRUD(BaseCRUD[AnalysisResultModel]):
    """CRUD operations for AnalysisResultModel."""

    def __init__(self) -> None:
        """Initialize AnalysisResultCRUD with AnalysisResultModel."""
        super().__init__(AnalysisResultModel)

    async def get_latest(
        self,
        session: AsyncSession,
        file_id: UUID,
        action: AnalysisAction,
        model_used: str,
    ) -> AnalysisResultModel | None:
        """
        Retrieve the newest cached result for a file, action and model.

        Args:
            session: Async database session
            file_id: Analysed file UUID
            action: Analysis action
            model_used: Model key

        Returns:
            Newest matching AnalysisResultModel, or None
        """
        stmt = (
            select(AnalysisResultModel)
            .where(
                AnalysisResultModel.file_id == file_id,
                AnalysisResultModel.action_type == action,
                AnalysisResultModel.model_used == model_used,
            )
            .order_by(AnalysisResultModel.created_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


analysis_result_crud = AnalysisResultCRUD()
