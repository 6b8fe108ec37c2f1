# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-22
# Updated: 2026-01-26
# Description: RAGDocumentService.py
# -----------------------------------------------------------------------------
import logging
from typing import Dict, Any, List, Optional

from document.RAGDocument import RAGDocument
from errors.RAGErrors import RAGError, StorageError
from services.RAGIngestService import RAGIngestService
from utility.logging_utils import get_class_logger
from vectorstore.RAGVectorStore import RAGVectorStore


class RAGDocumentService:
    """
    Document facade used by FastAPI
    - add a document via RAGIngestService
    - list stored documents, newest first, via RAGVectorStore
    """

    def __init__(self,
                 *,
                 ingest_service: RAGIngestService,
                 store: RAGVectorStore,
                 logger: logging.Logger | None = None, ) -> None:
        self.ingest_service = ingest_service
        self.store = store

        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info("RAGDocumentService initialised successfully (ingest=%s, store=%s)",
                         type(ingest_service).__name__, type(store).__name__)

    def add_document(self, *, content: str, metadata: Optional[Dict[str, Any]] = None) -> int:
        return self.ingest_service.ingest(content, metadata)

    def list_documents(self) -> List[RAGDocument]:
        self.logger.info("list_documents (start)")
        try:
            docs = self.store.list_all()
        except RAGError:
            raise
        except Exception as e:
            raise StorageError(f"listing documents failed: {e}") from e

        self.logger.info("list_documents (done) count=%d", len(docs))
        return docs
