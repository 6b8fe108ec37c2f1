# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: RAGDocument
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class RAGDocument:
    """A stored document record as returned by a full listing (embedding omitted)."""
    id: int
    content: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None


@dataclass(frozen=True)
class SimilarityResult:
    """One nearest-neighbour hit. Only lives for the duration of a query."""
    id: int
    content: str
    similarity: float
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_source(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "metadata": self.metadata,
            "similarity": self.similarity,
        }
