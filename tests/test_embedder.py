# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Updated: 2026-01-22
# Description: test_embedder.py
# -----------------------------------------------------------------------------
import math
from types import SimpleNamespace

import pytest

from embedding.RAGEmbedder import RAGEmbedder
from errors.RAGErrors import InvalidInputError, UpstreamError
from conftest import TEST_DIM, connection_error


def test_embed_returns_float_vector(embedder, embedding_client):
    vec = embedder.embed("The sky is blue.")

    assert len(vec) == TEST_DIM
    assert all(isinstance(x, float) for x in vec)
    assert embedding_client.calls == [{"model": "text-embedding-3-small", "input": "The sky is blue."}]


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_text_fails_before_remote_call(embedder, embedding_client, text):
    with pytest.raises(InvalidInputError):
        embedder.embed(text)
    assert embedding_client.calls == []


def test_remote_error_becomes_upstream_error(embedder, embedding_client):
    embedding_client.fail_with = connection_error()
    with pytest.raises(UpstreamError):
        embedder.embed("hello")


def test_malformed_payload_becomes_upstream_error(embedder, embedding_client):
    embedding_client.malformed = True
    with pytest.raises(UpstreamError):
        embedder.embed("hello")


@pytest.mark.parametrize(
    "payload",
    [
        SimpleNamespace(),
        SimpleNamespace(data=[SimpleNamespace(embedding=[])]),
        SimpleNamespace(data=[SimpleNamespace(embedding=None)]),
        SimpleNamespace(data=[SimpleNamespace(embedding=["a", "b"])]),
        SimpleNamespace(data=[SimpleNamespace(embedding=[1.0, math.nan])]),
        SimpleNamespace(data=[SimpleNamespace(embedding=[[1.0], [2.0]])]),
    ],
)
def test_bad_vectors_are_rejected(cfg, payload):
    class _Client:
        def __init__(self):
            self.embeddings = self

        def create(self, **kwargs):
            return payload

    with pytest.raises(UpstreamError):
        RAGEmbedder(cfg, client=_Client()).embed("hello")


def test_healthcheck_checks_dimension(cfg, embedding_client):
    assert RAGEmbedder(cfg, client=embedding_client).healthcheck() is True

    embedding_client.dim = TEST_DIM + 1
    assert RAGEmbedder(cfg, client=embedding_client).healthcheck() is False


def test_healthcheck_false_on_remote_failure(embedder, embedding_client):
    embedding_client.fail_with = connection_error()
    assert embedder.healthcheck() is False
