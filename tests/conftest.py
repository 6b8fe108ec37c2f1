# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-12
# Updated: 2026-02-01
# Description: conftest.py
# -----------------------------------------------------------------------------

import sys
import zlib
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List

import httpx
import openai
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from chat.OpenAIChat import OpenAIChat  # noqa: E402
from config.Config import Config  # noqa: E402
from embedding.RAGEmbedder import RAGEmbedder  # noqa: E402
from services.RAGDocumentService import RAGDocumentService  # noqa: E402
from services.RAGHealthService import RAGHealthService  # noqa: E402
from services.RAGIngestService import RAGIngestService  # noqa: E402
from services.RAGQueryService import RAGQueryService  # noqa: E402
from vectorstore.InMemoryVectorStore import InMemoryVectorStore  # noqa: E402

TEST_DIM = 8


def make_cfg(**overrides: Any) -> Config:
    values: Dict[str, Any] = {
        "database_url": "",
        "vector_backend": "memory",
        "embedding_dim": TEST_DIM,
        "ivfflat_lists": 100,
        "ivfflat_probes": 10,
        "openai_api_key": "test-key",
        "openai_base_url": "https://api.openai.com/v1",
        "openai_embed_model": "text-embedding-3-small",
        "openai_chat_model": "gpt-4o-mini",
        "openai_max_tokens": None,
        "openai_timeout_seconds": 5.0,
        "openai_max_retries": 0,
        "port": 3001,
    }
    values.update(overrides)
    return Config(**values)


def bag_of_words_vector(text: str, dim: int = TEST_DIM) -> List[float]:
    """Deterministic toy embedding: word counts hashed into `dim` buckets."""
    vec = [0.0] * dim
    for word in text.lower().replace("?", " ").replace(".", " ").split():
        vec[zlib.crc32(word.encode("utf-8")) % dim] += 1.0
    return vec


def connection_error() -> openai.APIConnectionError:
    return openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1"))


class FakeEmbeddingClient:
    """Stands in for openai.OpenAI on the embeddings path."""

    def __init__(self, dim: int = TEST_DIM) -> None:
        self.dim = dim
        self.calls: List[Dict[str, Any]] = []
        self.malformed = False
        self.fail_with: Exception | None = None
        self.embeddings = self

    def create(self, *, model: str, input: str) -> Any:
        self.calls.append({"model": model, "input": input})
        if self.fail_with is not None:
            raise self.fail_with
        if self.malformed:
            return SimpleNamespace(data=[])
        return SimpleNamespace(data=[SimpleNamespace(embedding=bag_of_words_vector(input, self.dim))])


class FakeChatClient:
    """Stands in for openai.OpenAI on the chat path; echoes the user message back."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.fail_with: Exception | None = None
        self.chat = SimpleNamespace(completions=self)

    def create(self, **params: Any) -> Any:
        self.calls.append(params)
        if self.fail_with is not None:
            raise self.fail_with
        user = params["messages"][-1]["content"]
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=f"ECHO: {user}"))],
            model=params["model"],
            usage=None,
        )


@pytest.fixture
def cfg() -> Config:
    return make_cfg()


@pytest.fixture
def embedding_client() -> FakeEmbeddingClient:
    return FakeEmbeddingClient()


@pytest.fixture
def chat_client() -> FakeChatClient:
    return FakeChatClient()


@pytest.fixture
def embedder(cfg: Config, embedding_client: FakeEmbeddingClient) -> RAGEmbedder:
    return RAGEmbedder(cfg, client=embedding_client)


@pytest.fixture
def chat(cfg: Config, chat_client: FakeChatClient) -> OpenAIChat:
    return OpenAIChat(cfg=cfg, client=chat_client)


@pytest.fixture
def store() -> InMemoryVectorStore:
    return InMemoryVectorStore(embedding_dim=TEST_DIM)


@pytest.fixture
def ingest_service(store: InMemoryVectorStore, embedder: RAGEmbedder) -> RAGIngestService:
    return RAGIngestService(store=store, embedder=embedder)


@pytest.fixture
def query_service(store: InMemoryVectorStore, embedder: RAGEmbedder, chat: OpenAIChat) -> RAGQueryService:
    return RAGQueryService(embedder=embedder, store=store, generator=chat)


@pytest.fixture
def document_service(ingest_service: RAGIngestService, store: InMemoryVectorStore) -> RAGDocumentService:
    return RAGDocumentService(ingest_service=ingest_service, store=store)


@pytest.fixture
def health_service(store: InMemoryVectorStore, embedder: RAGEmbedder, chat: OpenAIChat) -> RAGHealthService:
    return RAGHealthService(store=store, embedder=embedder, chat_client=chat)


@pytest.fixture
def api_client(query_service, document_service, health_service):
    from starlette.testclient import TestClient

    from api import dependencies
    from api.main import app

    app.dependency_overrides[dependencies.get_query_service] = lambda: query_service
    app.dependency_overrides[dependencies.get_document_service] = lambda: document_service
    app.dependency_overrides[dependencies.get_health_service] = lambda: health_service

    # no context manager: the lifespan would build the real container
    yield TestClient(app)

    app.dependency_overrides.clear()
