# faqaas/repository/sql.py
import logging
from collections import defaultdict
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from faqaas.database import search_index
from faqaas.errors import StorageError
from faqaas.models import FAQRecord, FAQTextRecord
from faqaas.repository.base import FAQRepository
from faqaas.schemas import FAQ, FAQText, Locale

logger = logging.getLogger(__name__)


class SQLFAQRepository(FAQRepository):
    """FAQ repository backed by SQLAlchemy (PostgreSQL in production, SQLite locally)."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        # One transaction per repository call: commit on success, rollback on error.
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Database error: %s", e)
            raise StorageError(str(e)) from e
        finally:
            db.close()

    # ----- reads -----

    def _texts_by_faq(self, db: Session, faq_ids: list[int]) -> dict[int, list[FAQText]]:
        texts: dict[int, list[FAQText]] = defaultdict(list)
        if not faq_ids:
            return texts
        rows = db.execute(
            select(FAQTextRecord)
            .where(FAQTextRecord.faq_id.in_(faq_ids))
            .order_by(FAQTextRecord.faq_id, FAQTextRecord.id)
        ).scalars()
        for row in rows:
            texts[row.faq_id].append(
                FAQText(locale=Locale(code=row.locale), question=row.question, answer=row.answer)
            )
        return texts

    def all_faqs(self) -> list[FAQ]:
        with self._session() as db:
            ids = list(db.execute(select(FAQRecord.id).order_by(FAQRecord.id)).scalars())
            texts = self._texts_by_faq(db, ids)
        return [FAQ(id=faq_id, texts=texts.get(faq_id, [])) for faq_id in ids]

    def faq_by_id(self, faq_id: int) -> FAQ:
        with self._session() as db:
            texts = self._texts_by_faq(db, [faq_id])
        return FAQ(id=faq_id, texts=texts.get(faq_id, []))

    def search_faqs(self, locale_code: str, query: str) -> list[FAQ]:
        with self._session() as db:
            ids = search_index.search_faq_ids(db, locale_code, query)
            texts = self._texts_by_faq(db, ids)
        return [FAQ(id=faq_id, texts=texts.get(faq_id, [])) for faq_id in ids]

    # ----- writes -----

    def update_search_index(self) -> None:
        with self._session() as db:
            search_index.rebuild_search_index(db)

    def create_faq(self) -> FAQ:
        with self._session() as db:
            record = FAQRecord()
            db.add(record)
            db.flush()
            faq_id = record.id
        return FAQ(id=faq_id)

    def save_faq_text(self, faq_id: int, text: FAQText) -> None:
        values = {
            "faq_id": faq_id,
            "locale": text.locale.code,
            "question": text.question,
            "answer": text.answer,
        }
        with self._session() as db:
            dialect = postgresql if db.get_bind().dialect.name == "postgresql" else sqlite
            stmt = dialect.insert(FAQTextRecord).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[FAQTextRecord.faq_id, FAQTextRecord.locale],
                set_={"question": stmt.excluded.question, "answer": stmt.excluded.answer},
            )
            db.execute(stmt)

    def delete_faq(self, faq_id: int) -> None:
        # Both statements share the session transaction, so a failure leaves both tables untouched.
        with self._session() as db:
            db.execute(delete(FAQTextRecord).where(FAQTextRecord.faq_id == faq_id))
            db.execute(delete(FAQRecord).where(FAQRecord.id == faq_id))

    def clear_db(self) -> None:
        with self._session() as db:
            db.execute(delete(FAQTextRecord))
            db.execute(delete(FAQRecord))
