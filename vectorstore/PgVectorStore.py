# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-24
# Description: PgVectorStore
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Sequence, Dict, Any, List

from pgvector.sqlalchemy import Vector
from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    exists,
    func,
    insert,
    select,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from document.RAGDocument import RAGDocument, SimilarityResult
from errors.RAGErrors import StorageError
from utility.logging_utils import get_class_logger
from vectorstore.RAGVectorStore import RAGVectorStore

TABLE_NAME = "documents"
INDEX_NAME = "documents_embedding_idx"


def build_documents_table(metadata: MetaData, embedding_dim: int, ivfflat_lists: int = 100) -> Table:
    """
    documents(id serial, content text, embedding vector(N), metadata jsonb, created_at timestamp)
    plus an ivfflat index on embedding using cosine distance.
    """
    table = Table(
        TABLE_NAME,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("content", Text, nullable=False),
        Column("embedding", Vector(embedding_dim)),
        Column("metadata", JSONB),
        Column("created_at", DateTime, server_default=func.now()),
    )
    Index(
        INDEX_NAME,
        table.c.embedding,
        postgresql_using="ivfflat",
        postgresql_with={"lists": ivfflat_lists},
        postgresql_ops={"embedding": "vector_cosine_ops"},
    )
    return table


@dataclass
class PgVectorStore(RAGVectorStore):
    engine: Engine
    embedding_dim: int
    ivfflat_lists: int = 100
    ivfflat_probes: int = 10
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        self.metadata = MetaData()
        self.table = build_documents_table(self.metadata, self.embedding_dim, self.ivfflat_lists)
        self.embedding_index = next(iter(self.table.indexes))

        self.logger.info(
            "PgVectorStore initialised (table=%s, dim=%d, lists=%d, probes=%d)",
            TABLE_NAME,
            self.embedding_dim,
            self.ivfflat_lists,
            self.ivfflat_probes,
        )

    def init_schema(self) -> None:
        """
        Idempotently create the vector extension, the documents table and
        its cosine index.
        """
        self.logger.info("Ensuring schema for table '%s'", TABLE_NAME)
        try:
            with self.engine.begin() as conn:
                conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
                self.metadata.create_all(conn, checkfirst=True)
                self.embedding_index.create(conn, checkfirst=True)
        except SQLAlchemyError as e:
            self.logger.error("Schema initialisation failed: %s", e)
            raise StorageError(f"schema initialisation failed: {e}") from e
        self.logger.info("Schema ready: table '%s', index '%s'", TABLE_NAME, INDEX_NAME)

    def test_connection(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            self.logger.error("PostgreSQL connection failed: %s", e)
            return False

    def _check_dim(self, embedding: Sequence[float]) -> List[float]:
        try:
            vec = [float(x) for x in embedding]
        except (TypeError, ValueError) as e:
            raise StorageError(f"embedding is not numeric: {e}") from e
        if len(vec) != self.embedding_dim:
            raise StorageError(
                f"embedding dimension mismatch: expected {self.embedding_dim}, got {len(vec)}"
            )
        return vec

    def insert(
            self,
            content: str,
            embedding: Sequence[float],
            metadata: Dict[str, Any] | None = None,
    ) -> int:
        vec = self._check_dim(embedding)
        stmt = (
            insert(self.table)
            .values(content=content, embedding=vec, metadata=metadata or {})
            .returning(self.table.c.id)
        )
        try:
            # begin() commits on exit, so the id is readable as soon as we return
            with self.engine.begin() as conn:
                doc_id = conn.execute(stmt).scalar_one()
        except SQLAlchemyError as e:
            self.logger.error("Insert into '%s' failed: %s", TABLE_NAME, e)
            raise StorageError(f"insert failed: {e}") from e

        self.logger.info("Inserted document id=%d (chars=%d)", doc_id, len(content))
        return doc_id

    def nearest_neighbors_stmt(self, query_embedding: Sequence[float], k: int):
        distance = self.table.c.embedding.cosine_distance(query_embedding)
        return (
            select(
                self.table.c.id,
                self.table.c.content,
                self.table.c.metadata,
                (1 - distance).label("similarity"),
            )
            .order_by(distance, self.table.c.id)
            .limit(k)
        )

    def nearest_neighbors(
            self,
            query_embedding: Sequence[float],
            k: int,
    ) -> List[SimilarityResult]:
        vec = self._check_dim(query_embedding)
        if k <= 0:
            return []

        stmt = self.nearest_neighbors_stmt(vec, k)
        try:
            with self.engine.begin() as conn:
                # SET does not take bind parameters; probes is a validated int
                conn.execute(text(f"SET LOCAL ivfflat.probes = {int(self.ivfflat_probes)}"))
                rows = conn.execute(stmt).all()

                # the probed lists can all be empty (e.g. index built on an empty table); rescan without the index
                if not rows and conn.execute(self.has_documents_stmt()).scalar():
                    self.logger.warning("Index search returned no rows on a non-empty table; rescanning exactly")
                    conn.execute(text("SET LOCAL enable_indexscan = off"))
                    rows = conn.execute(stmt).all()
        except SQLAlchemyError as e:
            self.logger.error("Similarity search on '%s' failed: %s", TABLE_NAME, e)
            raise StorageError(f"similarity search failed: {e}") from e

        self.logger.debug("Nearest neighbours: returned %d (k=%d)", len(rows), k)
        return [
            SimilarityResult(
                id=row.id,
                content=row.content,
                similarity=float(row.similarity),
                metadata=row._mapping["metadata"] or {},
            )
            for row in rows
        ]

    def has_documents_stmt(self):
        return select(exists().select_from(self.table))

    def has_documents(self) -> bool:
        try:
            with self.engine.connect() as conn:
                return bool(conn.execute(self.has_documents_stmt()).scalar())
        except SQLAlchemyError as e:
            self.logger.error("Row check on '%s' failed: %s", TABLE_NAME, e)
            raise StorageError(f"row check failed: {e}") from e

    def list_all(self) -> List[RAGDocument]:
        t = self.table
        stmt = (
            select(t.c.id, t.c.content, t.c.metadata, t.c.created_at)
            .order_by(t.c.created_at.desc(), t.c.id.desc())
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as e:
            self.logger.error("Listing '%s' failed: %s", TABLE_NAME, e)
            raise StorageError(f"listing documents failed: {e}") from e

        return [
            RAGDocument(
                id=row.id,
                content=row.content,
                metadata=row._mapping["metadata"] or {},
                created_at=row.created_at,
            )
            for row in rows
        ]
