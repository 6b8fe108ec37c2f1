# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-24
# Description: InMemoryVectorStore
# -----------------------------------------------------------------------------
import copy
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

import numpy as np

from document.RAGDocument import RAGDocument, SimilarityResult
from errors.RAGErrors import StorageError
from utility.logging_utils import get_class_logger
from vectorstore.RAGVectorStore import RAGVectorStore


@dataclass
class _Row:
    id: int
    content: str
    vector: np.ndarray
    metadata: Dict[str, Any]
    created_at: datetime


@dataclass
class InMemoryVectorStore(RAGVectorStore):
    """
    Process-local store with exact cosine search.
    For local development and tests; nothing survives a restart.
    """
    embedding_dim: int
    logger: Any = None
    _rows: List[_Row] = field(default_factory=list, init=False, repr=False)
    _next_id: int = field(default=1, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        self.logger.info("In-memory vector store ready (dim=%d)", self.embedding_dim)

    def init_schema(self) -> None:
        return None

    def test_connection(self) -> bool:
        return True

    def _as_vector(self, embedding: Sequence[float]) -> np.ndarray:
        try:
            vec = np.asarray(embedding, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise StorageError(f"embedding is not numeric: {e}") from e
        if vec.ndim != 1 or vec.shape[0] != self.embedding_dim:
            raise StorageError(
                f"embedding dimension mismatch: expected {self.embedding_dim}, got {vec.shape}"
            )
        return vec

    def insert(
            self,
            content: str,
            embedding: Sequence[float],
            metadata: Dict[str, Any] | None = None,
    ) -> int:
        vec = self._as_vector(embedding)
        with self._lock:
            doc_id = self._next_id
            self._next_id += 1
            self._rows.append(_Row(
                id=doc_id,
                content=content,
                vector=vec,
                metadata=copy.deepcopy(metadata or {}),
                created_at=datetime.now(timezone.utc),
            ))

        self.logger.info("Inserted document id=%d (chars=%d)", doc_id, len(content))
        return doc_id

    def nearest_neighbors(
            self,
            query_embedding: Sequence[float],
            k: int,
    ) -> List[SimilarityResult]:
        query = self._as_vector(query_embedding)
        with self._lock:
            rows = list(self._rows)

        if not rows or k <= 0:
            return []

        matrix = np.vstack([r.vector for r in rows])
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        dots = matrix @ query
        # zero-length vectors have no direction; score them 0
        sims = np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)

        # stable sort keeps insertion order among equal scores
        order = np.argsort(-sims, kind="stable")[:k]
        results = [
            SimilarityResult(
                id=rows[i].id,
                content=rows[i].content,
                similarity=float(sims[i]),
                metadata=copy.deepcopy(rows[i].metadata),
            )
            for i in order
        ]
        self.logger.debug("Nearest neighbours: returned %d of %d (k=%d)", len(results), len(rows), k)
        return results

    def list_all(self) -> List[RAGDocument]:
        with self._lock:
            rows = list(self._rows)

        return [
            RAGDocument(
                id=r.id,
                content=r.content,
                metadata=copy.deepcopy(r.metadata),
                created_at=r.created_at,
            )
            for r in reversed(rows)
        ]

    def has_documents(self) -> bool:
        with self._lock:
            return bool(self._rows)
