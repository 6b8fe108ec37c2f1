# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-26
# Description: RAGQueryService
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from chat.ContextAssembler import assemble_context
from document.RAGDocument import SimilarityResult
from errors.RAGErrors import InvalidInputError, RAGError, StorageError
from settings import EMPTY_CORPUS_ANSWER, SYSTEM_PROMPT, TOP_K
from utility.logging_utils import get_class_logger


class QueryStage(str, Enum):
    VALIDATING = "validating"
    EMBEDDING = "embedding"
    RETRIEVING = "retrieving"
    ASSEMBLING = "assembling"
    GENERATING = "generating"
    DONE = "done"
    EMPTY_CORPUS = "empty_corpus"
    ERROR = "error"


@dataclass
class QueryResult:
    answer: str
    sources: List[SimilarityResult] = field(default_factory=list)
    stage: QueryStage = QueryStage.DONE

    @property
    def empty_corpus(self) -> bool:
        return self.stage == QueryStage.EMPTY_CORPUS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "answer": self.answer,
            "sources": [s.to_source() for s in self.sources],
        }


class RAGQueryService:
    """
    Query pipeline:
        - validate the question
        - embed it
        - retrieve the TOP_K closest passages
        - assemble them into one context block
        - ask the generator for a grounded answer
        - return answer + sources

    An empty store short-circuits to a canned answer without calling the
    generator. Stages run strictly in order; any failure aborts the request.
    """

    def __init__(
            self,
            *,
            embedder: Any,
            store: Any,
            generator: Any,
            top_k: int = TOP_K,
            system_prompt: str = SYSTEM_PROMPT,
            logger: logging.Logger | None = None,
    ) -> None:
        self.embedder = embedder
        self.store = store
        self.generator = generator
        self.top_k = top_k
        self.system_prompt = system_prompt
        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info(
            "RAGQueryService initialised (embedder=%s store=%s generator=%s top_k=%d)",
            type(embedder).__name__,
            type(store).__name__,
            type(generator).__name__,
            top_k,
        )

    def query(self, question: str) -> QueryResult:
        stage = QueryStage.VALIDATING
        try:
            if not isinstance(question, str) or not question.strip():
                raise InvalidInputError("question must not be empty")
            self.logger.info("query: question='%s' (start)", question.strip()[:120])

            stage = QueryStage.EMBEDDING
            query_vector = self.embedder.embed(question)

            stage = QueryStage.RETRIEVING
            passages = self.store.nearest_neighbors(query_vector, self.top_k)
            self.logger.info("query: retrieved passages=%d", len(passages))
            if not passages:
                if self.store.has_documents():
                    raise StorageError("similarity search returned no passages from a non-empty store")
                self.logger.info("query: store is empty, returning canned answer")
                return QueryResult(answer=EMPTY_CORPUS_ANSWER, sources=[], stage=QueryStage.EMPTY_CORPUS)

            stage = QueryStage.ASSEMBLING
            context = assemble_context(passages)
            self.logger.debug("query: context_chars=%d", len(context))

            stage = QueryStage.GENERATING
            answer = self.generator.generate(self.system_prompt, context, question)

        except RAGError as e:
            failed_at, stage = stage, QueryStage.ERROR
            self.logger.warning("query %s at stage=%s kind=%s: %s", stage.value, failed_at.value, e.kind, e)
            raise
        except Exception as e:
            failed_at, stage = stage, QueryStage.ERROR
            self.logger.error("query %s at stage=%s (unexpected): %s", stage.value, failed_at.value, e, exc_info=True)
            raise

        self.logger.info("query: answer_chars=%d sources=%d (done)", len(answer), len(passages))
        return QueryResult(answer=answer, sources=list(passages), stage=QueryStage.DONE)
