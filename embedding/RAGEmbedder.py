# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Updated: 2026-01-22
# Description: RAGEmbedder
# -----------------------------------------------------------------------------
import logging
from typing import Any, List, Optional

import numpy as np
from openai import OpenAI, OpenAIError

from config.Config import Config
from errors.RAGErrors import InvalidInputError, UpstreamError
from utility.logging_utils import get_class_logger


class RAGEmbedder:
    """
    Text -> vector adapter over an OpenAI-compatible embeddings endpoint.

    Holds no state besides the client. Failures are not retried here;
    the caller decides how to recover.
    """

    def __init__(
            self,
            cfg: Config,
            *,
            client: Any = None,
            logger: Optional[logging.Logger] = None,
    ):
        self.cfg = cfg
        self.logger = logger or get_class_logger(self.__class__)
        self.model = cfg.openai_embed_model
        self.expected_dim = cfg.embedding_dim

        self.client = client or OpenAI(
            api_key=cfg.openai_api_key,
            base_url=cfg.openai_base_url,
            timeout=cfg.openai_timeout_seconds,
            max_retries=cfg.openai_max_retries,
        )
        self.logger.info("RAGEmbedder initialised (model=%s, dim=%d)", self.model, self.expected_dim)

    def embed(self, text: str) -> List[float]:
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError("text to embed must not be empty")

        self.logger.debug("Embedding text (chars=%d, model=%s)", len(text), self.model)
        try:
            resp = self.client.embeddings.create(model=self.model, input=text)
        except OpenAIError as e:
            self.logger.error("Embedding request failed: %s", e)
            raise UpstreamError(f"embedding request failed: {e}") from e

        vector = self._parse_vector(resp)
        self.logger.debug("Embedding received: vector_length=%d", len(vector))
        return vector

    def _parse_vector(self, resp: Any) -> List[float]:
        """
        Pull data[0].embedding out of the response and check it is a
        non-empty, finite, one-dimensional numeric vector.
        """
        try:
            raw = resp.data[0].embedding
            arr = np.asarray(raw, dtype=np.float64)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            self.logger.error("Malformed embedding response: %r", resp)
            raise UpstreamError(f"malformed embedding response: {e}") from e

        if arr.ndim != 1 or arr.size == 0:
            raise UpstreamError(f"malformed embedding response: unexpected shape {arr.shape}")
        if not np.all(np.isfinite(arr)):
            raise UpstreamError("malformed embedding response: non-finite values")

        return arr.tolist()

    def healthcheck(self) -> bool:
        try:
            vector = self.embed("embedding healthcheck")
        except UpstreamError as e:
            self.logger.warning("Embedding healthcheck failed: %s", e)
            return False

        if len(vector) != self.expected_dim:
            self.logger.warning(
                "Embedding dimension mismatch: expected %d, got %d",
                self.expected_dim,
                len(vector),
            )
            return False
        return True
