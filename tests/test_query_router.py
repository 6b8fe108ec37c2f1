# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-30
# Description: test_query_router.py
# -----------------------------------------------------------------------------
from settings import EMPTY_CORPUS_ANSWER
from conftest import connection_error


def test_query_on_empty_store_returns_canned_answer(api_client, chat_client):
    # Scenario A
    r = api_client.post("/query", json={"question": "What is X?"})

    assert r.status_code == 200, r.text
    assert r.json() == {"answer": EMPTY_CORPUS_ANSWER, "sources": []}
    assert chat_client.calls == []


def test_query_after_insert_is_grounded(api_client):
    # Scenario B
    assert api_client.post("/documents", json={"content": "The sky is blue."}).status_code == 200

    r = api_client.post("/query", json={"question": "What color is the sky?"})

    assert r.status_code == 200, r.text
    data = r.json()
    assert data["answer"]
    assert "The sky is blue." in data["answer"]
    assert [s["content"] for s in data["sources"]] == ["The sky is blue."]
    assert isinstance(data["sources"][0]["similarity"], float)


def test_sources_capped_at_three(api_client):
    for i in range(5):
        api_client.post("/documents", json={"content": f"fact number {i}"})

    data = api_client.post("/query", json={"question": "fact number 2"}).json()
    assert len(data["sources"]) == 3
    sims = [s["similarity"] for s in data["sources"]]
    assert sims == sorted(sims, reverse=True)


def test_empty_question_is_400(api_client, embedding_client):
    for payload in ({"question": ""}, {"question": "  "}, {}, {"question": None}):
        r = api_client.post("/query", json=payload)
        assert r.status_code == 400, r.text
    assert embedding_client.calls == []


def test_malformed_embedding_is_500(api_client, embedding_client):
    # Scenario D, query side
    embedding_client.malformed = True

    r = api_client.post("/query", json={"question": "What color is the sky?"})

    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to process query"


def test_generation_failure_is_500(api_client, chat_client):
    api_client.post("/documents", json={"content": "The sky is blue."})
    chat_client.fail_with = connection_error()

    r = api_client.post("/query", json={"question": "What color is the sky?"})
    assert r.status_code == 500
    assert r.json()["detail"] == "Failed to process query"
