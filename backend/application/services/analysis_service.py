"""
Analysis service orchestrator.

Generates quizzes, flashcards and tutor answers for a file. Quiz and
flashcard output is cached per (file, action, model); chat answers depend
on the query and are never cached.

Dependencies: backend.core.analysis, backend.boundary.db.CRUD,
backend.application.services.retrieval_service
System role: Study material generation orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.application.services.retrieval_service import RetrievalService
from backend.boundary.db.CRUD.analysis_result_crud import analysis_result_crud
from backend.boundary.db.CRUD.file_crud import file_crud
from backend.boundary.db.models.analysis_result_model import AnalysisAction
from backend.core.analysis import LLMClient, build_prompts, parse_action
from backend.core.exceptions import ValidationError
from backend.models.analysis import AnalysisResponse
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

RAG_CHUNK_LIMIT = 5
CACHEABLE_ACTIONS = frozenset({AnalysisAction.QUIZ, AnalysisAction.FLASHCARDS})


class AnalysisService:
    """Study material generation with result caching."""

    def __init__(
        self,
        db: AsyncSession,
        retrieval: RetrievalService,
        llm_client: LLMClient,
    ) -> None:
        """
        Initialize analysis service.

        Args:
            db: Async SQLAlchemy session
            retrieval: Chunk retrieval for query-focused context
            llm_client: Chat model client
        """
        self.db = db
        self.retrieval = retrieval
        self.llm_client = llm_client

    async def analyze(
        self,
        file_name: str,
        action: str,
        file_id: UUID | None = None,
        query: str | None = None,
        model: str | None = None,
    ) -> AnalysisResponse:
        """
        Generate study material for a file.

        Steps:
        1. Validate file name, action and model
        2. Return a cached quiz/flashcards result when one exists
        3. Gather content: retrieved chunks for a query, else the full text
        4. Render prompts and call the model
        5. Cache quiz/flashcards output

        Database faults in steps 2, 3 and 5 are logged and skipped.

        Args:
            file_name: Display name of the file
            action: quiz, flashcards or chat
            file_id: Stored file, enables caching and retrieval
            query: Student question or focus
            model: Model key (defaults to the configured default)

        Returns:
            AnalysisResponse: Generated or cached analysis

        Raises:
            ValidationError: Missing file name, unknown action or model
            AnalysisError: Model call failed
        """
        if not file_name or not file_name.strip():
            raise ValidationError("file_name is required", field="file_name")
        resolved_action = parse_action(action)
        model_key, option = self.llm_client.resolve_model(model)

        if file_id is not None and resolved_action in CACHEABLE_ACTIONS:
            cached = await self._cached(file_id, resolved_action, model_key)
            if cached is not None:
                logger.info(
                    f"{__name__}:analyze - Returning cached analysis",
                    extra={"file_id": str(file_id), "action": resolved_action.value},
                )
                return AnalysisResponse(
                    analysis=cached,
                    action=resolved_action,
                    file_name=file_name,
                    model=option.name,
                    model_key=model_key,
                    cached=True,
                )

        content = await self._content(file_id, query)
        messages = build_prompts(resolved_action, file_name, content, query)

        logger.info(
            f"{__name__}:analyze - Using model {option.name} for {resolved_action.value} analysis",
            extra={"file_id": str(file_id) if file_id else None, "content_length": len(content)},
        )
        analysis = await self.llm_client.generate(messages, model_key)

        if file_id is not None and resolved_action in CACHEABLE_ACTIONS:
            await self._store(file_id, resolved_action, model_key, analysis)

        return AnalysisResponse(
            analysis=analysis,
            action=resolved_action,
            file_name=file_name,
            model=option.name,
            model_key=model_key,
            cached=False,
        )

    async def _cached(
        self,
        file_id: UUID,
        action: AnalysisAction,
        model_key: str,
    ) -> str | None:
        try:
            row = await analysis_result_crud.get_latest(self.db, file_id, action, model_key)
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_cached - Cache lookup failed, generating instead",
                e,
                file_id=file_id,
            )
            await self.db.rollback()
            return None
        return row.analysis_text if row else None

    async def _content(self, file_id: UUID | None, query: str | None) -> str:
        if file_id is None:
            return ""
        if query and query.strip():
            assembled = await self.retrieval.build_context(file_id, query, RAG_CHUNK_LIMIT)
            return assembled.context
        try:
            file = await file_crud.get_by_id(self.db, file_id)
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_content - Could not load file text, continuing without content",
                e,
                file_id=file_id,
            )
            await self.db.rollback()
            return ""
        if file is None:
            logger.warning(
                f"{__name__}:_content - File not found, continuing without content",
                extra={"file_id": str(file_id)},
            )
            return ""
        return file.extracted_text or ""

    async def _store(
        self,
        file_id: UUID,
        action: AnalysisAction,
        model_key: str,
        analysis: str,
    ) -> None:
        try:
            await analysis_result_crud.create(
                self.db,
                file_id=file_id,
                action_type=action,
                model_used=model_key,
                analysis_text=analysis,
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_store - Caching analysis result failed",
                e,
                file_id=file_id,
            )
            await self.db.rollback()
