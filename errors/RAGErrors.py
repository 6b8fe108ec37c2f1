# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-21
# Description: RAGErrors
# -----------------------------------------------------------------------------


class RAGError(Exception):
    """
    Base class for failures raised by the RAG core.

    `kind` is what gets logged at the API boundary; callers only ever see a
    generic message for server-side kinds.
    """

    kind = "rag"


class InvalidInputError(RAGError):
    """Empty or missing required field. Client error, never retried."""

    kind = "invalid_input"


class UpstreamError(RAGError):
    """Embedding or chat service failed (non-2xx, timeout, malformed payload)."""

    kind = "upstream"


class StorageError(RAGError):
    """Vector store read/write failure, including dimensionality mismatch."""

    kind = "storage"


class ConfigError(RAGError):
    """Missing or malformed configuration. Fatal at startup."""

    kind = "config"
