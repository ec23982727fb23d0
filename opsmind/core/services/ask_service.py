"""Ask service - question answering over the chunk store."""

import logging
from enum import Enum

from ..models.answer import AnswerMode, AskResponse, AskStatus
from .answer_service import AnswerService
from .chunk_store import ChunkStore
from .context_builder import ContextBuilder
from .embedding_service import EmbeddingService
from .ranking_service import RankingService

logger = logging.getLogger(__name__)

NO_DOCUMENTS_ANSWER = "No documents have been uploaded yet. Upload a document and ask again."
NO_CONTEXT_ANSWER = (
    "I couldn't find any information about that in the uploaded documents. "
    "(Try using more general terms)"
)
INVALID_QUESTION_ANSWER = "Please enter a question."
EMBEDDING_FAILED_ERROR = "Failed to embed question"


class AskState(str, Enum):
    """Steps of an ask request."""
    RECEIVED = "received"
    EMBEDDING_QUERY = "embedding_query"
    RANKING = "ranking"
    ASSEMBLING_CONTEXT = "assembling_context"
    SYNTHESIZING = "synthesizing"
    DONE = "done"


class AskService:
    """Embed the question, rank chunks, assemble context, synthesize."""

    def __init__(
        self,
        store: ChunkStore,
        embedding_service: EmbeddingService,
        ranking_service: RankingService,
        context_builder: ContextBuilder,
        answer_service: AnswerService,
    ):
        self._store = store
        self._embedding = embedding_service
        self._ranking = ranking_service
        self._context_builder = context_builder
        self._answer = answer_service

    @staticmethod
    def _enter(state: AskState, question: str) -> None:
        logger.debug(f"[ask] {state.value}: '{question[:50]}'")

    async def ask(self, question: str) -> AskResponse:
        """Answer a question from stored documents.

        Args:
            question: Free-text question.

        Returns:
            Answer with sources, or a descriptive response when there is
            nothing to answer from. Query-embedding failure is reported
            with status EMBEDDING_FAILED.
        """
        question = (question or "").strip()
        self._enter(AskState.RECEIVED, question)

        if not question:
            return AskResponse(
                status=AskStatus.INVALID_QUESTION, answer=INVALID_QUESTION_ANSWER
            )

        if self._store.is_empty():
            logger.info("Ask: no documents stored")
            return AskResponse(status=AskStatus.NO_DOCUMENTS, answer=NO_DOCUMENTS_ANSWER)

        self._enter(AskState.EMBEDDING_QUERY, question)
        query_vector = await self._embedding.embed_query(question)
        if query_vector is None:
            return AskResponse(
                status=AskStatus.EMBEDDING_FAILED,
                answer="",
                error=EMBEDDING_FAILED_ERROR,
            )

        self._enter(AskState.RANKING, question)
        ranking = self._ranking.rank(question, query_vector, self._store.all_chunks())

        self._enter(AskState.ASSEMBLING_CONTEXT, question)
        context = self._context_builder.build(ranking.chunks)
        if context.is_empty:
            return AskResponse(
                status=AskStatus.NO_RELEVANT_CONTEXT,
                answer=NO_CONTEXT_ANSWER,
                strategy_used=ranking.method,
            )

        self._enter(AskState.SYNTHESIZING, question)
        answer = await self._answer.synthesize(question, context)

        self._enter(AskState.DONE, question)
        if answer.mode == AnswerMode.FALLBACK:
            logger.warning("Ask: answered in fallback mode")

        return AskResponse(
            status=AskStatus.ANSWERED,
            answer=answer.text,
            sources=answer.sources,
            strategy_used=ranking.method,
            mode=answer.mode,
        )
