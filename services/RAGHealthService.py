# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-20
# Updated: 2026-01-27
# Description: RAGHealthService.py
# -----------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from api.schemas.health import DeepHealthResponse, SmokeTestSummary
from utility.logging_utils import get_class_logger


@dataclass
class RAGHealthService:
    """
    Runs smoke checks against the store and the two model services.
    Returns DeepHealthResponse for API layer
    """

    store: Any
    embedder: Any
    chat_client: Any
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

    def _run_check(self, name: str, check: Callable[[], bool]) -> bool:
        try:
            ok = bool(check())
        except Exception as e:
            self.logger.exception("%s raised an exception: %s", name, e)
            return False

        if ok:
            self.logger.info("%s: PASS", name)
        else:
            self.logger.error("%s: FAIL", name)
        return ok

    def deep_health(self) -> DeepHealthResponse:
        results: Dict[str, bool] = {
            "store_health": self._run_check("store_health", self.store.test_connection),
            "embedding_health": self._run_check("embedding_health", self.embedder.healthcheck),
            "chat_health": self._run_check("chat_health", self.chat_client.healthcheck),
        }

        total = len(results)
        passed = sum(1 for ok in results.values() if ok)
        failed = total - passed

        self.logger.info("Smoke test summary: %d total, %d passed, %d failed", total, passed, failed)

        return DeepHealthResponse(
            status="ok" if failed == 0 else "error",
            results=results,
            summary=SmokeTestSummary(total=total, passed=passed, failed=failed),
        )
