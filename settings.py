# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-09
# Updated: 2026-02-02
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Retrieval
# -----------------------------------------------------------------------------
# Passages retrieved per question. Bounds both recall and prompt size.
TOP_K = 3


# -----------------------------------------------------------------------------
# Prompting
# -----------------------------------------------------------------------------
SYSTEM_PROMPT = (
    "You are a helpful assistant. Use the following context to answer the question. "
    "If the answer is not in the context, say so."
)

USER_PROMPT_TEMPLATE = "Context:\n{context}\n\nQuestion: {question}"

EMPTY_CORPUS_ANSWER = (
    "There are no documents to answer from yet. Add some documents and ask again."
)


# -----------------------------------------------------------------------------
# Defaults (overridable through Config / env)
# -----------------------------------------------------------------------------
DEFAULT_PORT = 3001
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"
DEFAULT_EMBED_MODEL = "text-embedding-3-small"
DEFAULT_CHAT_MODEL = "gpt-4o-mini"
DEFAULT_EMBEDDING_DIM = 1536
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_IVFFLAT_LISTS = 100
DEFAULT_IVFFLAT_PROBES = 10

VECTOR_BACKENDS = ("pgvector", "memory")

# Extra mount point for the routers, e.g. "/api". Empty keeps them at the root only.
API_PREFIX = _env("RAG_API_PREFIX").rstrip("/")
