# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-27
# Description: test_health_service.py
# -----------------------------------------------------------------------------
from services.RAGHealthService import RAGHealthService
from conftest import connection_error


def test_all_checks_pass(health_service):
    resp = health_service.deep_health()

    assert resp.status == "ok"
    assert resp.results == {"store_health": True, "embedding_health": True, "chat_health": True}
    assert (resp.summary.total, resp.summary.passed, resp.summary.failed) == (3, 3, 0)


def test_failing_check_marks_error(health_service, chat_client):
    chat_client.fail_with = connection_error()

    resp = health_service.deep_health()

    assert resp.status == "error"
    assert resp.results["chat_health"] is False
    assert resp.summary.failed == 1


def test_raising_check_counts_as_failure(embedder, chat):
    class _ExplodingStore:
        def test_connection(self):
            raise RuntimeError("boom")

    resp = RAGHealthService(store=_ExplodingStore(), embedder=embedder, chat_client=chat).deep_health()
    assert resp.results["store_health"] is False
    assert resp.status == "error"
