# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-27
# Description: query.py
# -----------------------------------------------------------------------------
from typing import Any, Dict, List, Optional

from pydantic import Field, BaseModel

class QueryRequest(BaseModel):
    # missing or null question is rejected with 400 by the service
    question: Optional[str] = None

class QuerySource(BaseModel):
    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
    similarity: float

class QueryResponse(BaseModel):
    answer: str
    sources: List[QuerySource]
