# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-22
# Updated: 2026-01-27
# Description: documents.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class AddDocumentRequest(BaseModel):
    # missing, null or non-object values are rejected with 400 by the service
    content: Optional[str] = None
    metadata: Any = None


class AddDocumentResponse(BaseModel):
    id: int
    message: str


class DocumentInfo(BaseModel):
    id: int
    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
