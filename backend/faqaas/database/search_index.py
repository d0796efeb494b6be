# faqaas/database/search_index.py
"""
Full-text search index over ``faq_texts``.

The index is a derived projection (question + answer per text row) that is
always rebuilt as a whole, never updated incrementally. On PostgreSQL it is a
materialized view searched with ``plainto_tsquery``/``ts_rank``; on SQLite
(local runs and tests) it is an FTS5 table ranked by bm25.
"""
import logging
import re

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

_POSTGRES_DDL = [
    """
    CREATE MATERIALIZED VIEW IF NOT EXISTS search_index AS
    SELECT faq_texts.id AS id,
           to_tsvector('simple', faq_texts.question || ' ' || faq_texts.answer) AS document
    FROM faq_texts;
    """,
    "CREATE INDEX IF NOT EXISTS search_index_document_idx ON search_index USING gin(document);",
]

_SQLITE_DDL = [
    """
    CREATE VIRTUAL TABLE IF NOT EXISTS search_index
    USING fts5(text_id UNINDEXED, document, tokenize = 'unicode61 remove_diacritics 0');
    """,
]

_POSTGRES_REFRESH = ["REFRESH MATERIALIZED VIEW search_index;"]

_SQLITE_REFRESH = [
    "DELETE FROM search_index;",
    """
    INSERT INTO search_index (text_id, document)
    SELECT id, question || ' ' || answer FROM faq_texts;
    """,
]

_POSTGRES_SEARCH = text("""
    SELECT faq_texts.faq_id
    FROM search_index
    JOIN faq_texts ON search_index.id = faq_texts.id
    WHERE document @@ plainto_tsquery('simple', :query)
    AND faq_texts.locale = :locale
    ORDER BY ts_rank(document, plainto_tsquery('simple', :query)) DESC, faq_texts.faq_id;
""")

_SQLITE_SEARCH = text("""
    SELECT faq_texts.faq_id
    FROM search_index
    JOIN faq_texts ON search_index.text_id = faq_texts.id
    WHERE search_index MATCH :query
    AND faq_texts.locale = :locale
    ORDER BY search_index.rank, faq_texts.faq_id;
""")

_WORD_RE = re.compile(r"\w+", re.UNICODE)


def _is_postgres(dialect_name: str) -> bool:
    return dialect_name == "postgresql"


def create_search_index(engine: Engine) -> None:
    statements = _POSTGRES_DDL if _is_postgres(engine.dialect.name) else _SQLITE_DDL
    with engine.begin() as conn:
        for stmt in statements:
            conn.execute(text(stmt))
    logger.info("Search index ready (%s)", engine.dialect.name)


def rebuild_search_index(session: Session) -> None:
    statements = _POSTGRES_REFRESH if _is_postgres(session.get_bind().dialect.name) else _SQLITE_REFRESH
    for stmt in statements:
        session.execute(text(stmt))


def _fts5_query(query: str) -> str:
    # Quoted terms are matched literally and joined with an implicit AND,
    # the same semantics plainto_tsquery gives on PostgreSQL.
    return " ".join(f'"{word}"' for word in _WORD_RE.findall(query))


def search_faq_ids(session: Session, locale: str, query: str) -> list[int]:
    """Returns the ids of matching FAQs, best match first."""
    if _is_postgres(session.get_bind().dialect.name):
        rows = session.execute(_POSTGRES_SEARCH, {"query": query, "locale": locale})
    else:
        fts_query = _fts5_query(query)
        if not fts_query:
            return []
        rows = session.execute(_SQLITE_SEARCH, {"query": fts_query, "locale": locale})

    ids: list[int] = []
    for (faq_id,) in rows:
        if faq_id not in ids:
            ids.append(faq_id)
    return ids
