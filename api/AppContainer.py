# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-29
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from functools import lru_cache

from sqlalchemy import create_engine

from chat.OpenAIChat import OpenAIChat
from config.Config import Config
from embedding.RAGEmbedder import RAGEmbedder
from services.RAGDocumentService import RAGDocumentService
from services.RAGHealthService import RAGHealthService
from services.RAGIngestService import RAGIngestService
from services.RAGQueryService import RAGQueryService
from utility.logging_utils import get_class_logger
from vectorstore.InMemoryVectorStore import InMemoryVectorStore
from vectorstore.PgVectorStore import PgVectorStore
from vectorstore.RAGVectorStore import RAGVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("Configuration loaded: %s", self.cfg.summary())

        # Core infrastructure
        self.store = self.build_store(self.cfg)
        self.embedder = RAGEmbedder(cfg=self.cfg)
        self.openai_chat = OpenAIChat(cfg=self.cfg)

        # Return a singleton RAGIngestService instance
        self.ingest_service = RAGIngestService(
            store=self.store,
            embedder=self.embedder,
        )

        # Return a singleton RAGQueryService instance
        self.query_service = RAGQueryService(
            embedder=self.embedder,
            store=self.store,
            generator=self.openai_chat,
        )

        # Return a singleton RAGDocumentService instance
        self.document_service = RAGDocumentService(
            ingest_service=self.ingest_service,
            store=self.store,
        )

        # Return a singleton RAGHealthService instance
        self.health_service = RAGHealthService(
            store=self.store,
            embedder=self.embedder,
            chat_client=self.openai_chat,
        )

    @staticmethod
    def build_store(cfg: Config) -> RAGVectorStore:
        if cfg.vector_backend == "memory":
            return InMemoryVectorStore(embedding_dim=cfg.embedding_dim)

        engine = create_engine(cfg.sqlalchemy_url, pool_pre_ping=True)
        return PgVectorStore(
            engine=engine,
            embedding_dim=cfg.embedding_dim,
            ivfflat_lists=cfg.ivfflat_lists,
            ivfflat_probes=cfg.ivfflat_probes,
        )


@lru_cache
def get_app_container() -> AppContainer:
    # built on first use so importing the app does not require a configured environment
    return AppContainer()
