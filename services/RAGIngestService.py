# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-21
# Updated: 2026-01-26
# Description: RAGIngestService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional

from errors.RAGErrors import InvalidInputError
from embedding.RAGEmbedder import RAGEmbedder
from utility.logging_utils import get_class_logger
from vectorstore.RAGVectorStore import RAGVectorStore


class RAGIngestService:
    """
    Owns the ingest pipeline:
      - validate content
      - embed
      - insert into vector store
    The store is only written once a vector has been computed.
    """

    def __init__(
        self,
        *,
        store: RAGVectorStore,
        embedder: RAGEmbedder,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.embedder = embedder
        self.logger = logger or get_class_logger(self.__class__)

    def ingest(self, content: str, metadata: Optional[Dict[str, Any]] = None) -> int:
        if not isinstance(content, str) or not content.strip():
            raise InvalidInputError("content must not be empty")
        if metadata is not None and not isinstance(metadata, Mapping):
            raise InvalidInputError("metadata must be an object")

        meta = dict(metadata or {})
        self.logger.info("Ingesting document (chars=%d, metadata_keys=%s)", len(content), sorted(meta))

        vector = self.embedder.embed(content)
        doc_id = self.store.insert(content, vector, meta)

        self.logger.info("Successfully ingested document id=%d", doc_id)
        return doc_id
