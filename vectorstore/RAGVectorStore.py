# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-15
# Updated: 2026-01-24
# Description: RAGVectorStore
# -----------------------------------------------------------------------------

from typing import Protocol, Sequence, Dict, Any, List, runtime_checkable

from document.RAGDocument import RAGDocument, SimilarityResult


@runtime_checkable
class RAGVectorStore(Protocol):
    """
    Append-only document store with cosine similarity search.

    similarity = 1 - cosine distance. Results come back closest first,
    ties in insertion order.
    """

    def init_schema(self) -> None:
        ...

    def test_connection(self) -> bool:
        ...

    def insert(
            self,
            content: str,
            embedding: Sequence[float],
            metadata: Dict[str, Any] | None = None,
    ) -> int:
        ...

    def nearest_neighbors(
            self,
            query_embedding: Sequence[float],
            k: int,
    ) -> List[SimilarityResult]:
        ...

    def list_all(self) -> List[RAGDocument]:
        ...

    def has_documents(self) -> bool:
        ...
