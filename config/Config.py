# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-08
# Updated: 2026-01-21
# Description: Config
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv, find_dotenv
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

import settings
from errors.RAGErrors import ConfigError
from settings import _env, _env_float, _env_int

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)


def normalise_database_url(raw: str) -> URL:
    """
    Parse a connection string into a SQLAlchemy URL bound to psycopg (v3).

    Accepts postgres://, postgresql:// and postgresql+<driver>:// forms.
    Raises ConfigError if the string is not a usable PostgreSQL URL.
    """
    try:
        url = make_url(raw)
    except (ArgumentError, ValueError) as e:
        raise ConfigError(f"DATABASE_URL is not a valid connection string: {e}") from e

    backend = url.drivername.split("+", 1)[0]
    if backend not in ("postgres", "postgresql"):
        raise ConfigError(f"DATABASE_URL must point at PostgreSQL, got scheme {url.drivername!r}")

    return url.set(drivername="postgresql+psycopg")


@dataclass(frozen=True)
class Config:
    # Vector store
    database_url: str
    vector_backend: str
    embedding_dim: int
    ivfflat_lists: int
    ivfflat_probes: int

    # OpenAI (embeddings + chat)
    openai_api_key: str
    openai_base_url: str
    openai_embed_model: str
    openai_chat_model: str
    openai_max_tokens: Optional[int]
    openai_timeout_seconds: float
    openai_max_retries: int

    # HTTP
    port: int

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # Vector store
        "database_url": "DATABASE_URL",
        "vector_backend": "RAG_VECTOR_BACKEND",
        "embedding_dim": "EMBEDDING_DIM",
        "ivfflat_lists": "IVFFLAT_LISTS",
        "ivfflat_probes": "IVFFLAT_PROBES",

        # OpenAI
        "openai_api_key": "OPENAI_API_KEY",
        "openai_base_url": "OPENAI_BASE_URL",      # e.g. https://api.openai.com/v1
        "openai_embed_model": "OPENAI_EMBED_MODEL",
        "openai_chat_model": "OPENAI_CHAT_MODEL",
        "openai_max_tokens": "OPENAI_MAX_TOKENS",
        "openai_timeout_seconds": "OPENAI_TIMEOUT_SECONDS",
        "openai_max_retries": "OPENAI_MAX_RETRIES",

        # HTTP
        "port": "PORT",
    }

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables."""
        env = Config.ENV_VARS
        try:
            # unset means "let the API decide"; an explicit value must be positive
            max_tokens = _env_int(env["openai_max_tokens"], 0) if _env(env["openai_max_tokens"]) else None
            return Config(
                database_url=_env(env["database_url"]),
                vector_backend=_env(env["vector_backend"], "pgvector").lower(),
                embedding_dim=_env_int(env["embedding_dim"], settings.DEFAULT_EMBEDDING_DIM),
                ivfflat_lists=_env_int(env["ivfflat_lists"], settings.DEFAULT_IVFFLAT_LISTS),
                ivfflat_probes=_env_int(env["ivfflat_probes"], settings.DEFAULT_IVFFLAT_PROBES),
                openai_api_key=_env(env["openai_api_key"]),
                openai_base_url=_env(env["openai_base_url"], settings.DEFAULT_OPENAI_BASE_URL),
                openai_embed_model=_env(env["openai_embed_model"], settings.DEFAULT_EMBED_MODEL),
                openai_chat_model=_env(env["openai_chat_model"], settings.DEFAULT_CHAT_MODEL),
                openai_max_tokens=max_tokens,
                openai_timeout_seconds=_env_float(
                    env["openai_timeout_seconds"], settings.DEFAULT_TIMEOUT_SECONDS
                ),
                openai_max_retries=_env_int(env["openai_max_retries"], 0),
                port=_env_int(env["port"], settings.DEFAULT_PORT),
            )
        except RuntimeError as e:
            # settings helpers raise RuntimeError on unparsable numbers
            raise ConfigError(str(e)) from e

    def __post_init__(self):
        """
        Fail fast if any required config is missing or malformed.
        The service must not start with a half-valid configuration.
        """
        missing = []
        if not self.openai_api_key:
            missing.append(self.ENV_VARS["openai_api_key"])
        if self.vector_backend == "pgvector" and not self.database_url:
            missing.append(self.ENV_VARS["database_url"])
        if missing:
            raise ConfigError(f"Missing required environment variables: {missing}")

        if self.vector_backend not in settings.VECTOR_BACKENDS:
            raise ConfigError(
                f"RAG_VECTOR_BACKEND must be one of {settings.VECTOR_BACKENDS}, got {self.vector_backend!r}"
            )
        if self.database_url:
            normalise_database_url(self.database_url)

        base = urlparse(self.openai_base_url)
        if base.scheme not in ("http", "https") or not base.netloc:
            raise ConfigError(f"OPENAI_BASE_URL must be an http(s) URL, got {self.openai_base_url!r}")

        for name in ("embedding_dim", "ivfflat_lists", "ivfflat_probes"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{self.ENV_VARS[name]} must be positive")
        if self.openai_max_tokens is not None and self.openai_max_tokens <= 0:
            raise ConfigError("OPENAI_MAX_TOKENS must be positive when set")
        if self.openai_timeout_seconds <= 0:
            raise ConfigError("OPENAI_TIMEOUT_SECONDS must be positive")
        if self.openai_max_retries < 0:
            raise ConfigError("OPENAI_MAX_RETRIES must not be negative")
        if not 1 <= self.port <= 65535:
            raise ConfigError(f"PORT must be between 1 and 65535, got {self.port}")

    @property
    def sqlalchemy_url(self) -> URL:
        return normalise_database_url(self.database_url)

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "database": (
                self.sqlalchemy_url.render_as_string(hide_password=True)
                if self.database_url else None
            ),
            "vector_backend": self.vector_backend,
            "embedding_dim": self.embedding_dim,
            "openai_base_url": self.openai_base_url,
            "openai_embed_model": self.openai_embed_model,
            "openai_chat_model": self.openai_chat_model,
            "port": self.port,
        }
