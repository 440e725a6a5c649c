"""
Stores for analysed strings.

A store is keyed by the trimmed string value and only supports
create / read / delete / list. Records are never updated in place.
"""
import logging
import threading
from abc import ABC, abstractmethod
from datetime import timezone
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from string_analyzer import config
from string_analyzer.database import create_db_engine, create_session_factory, init_db
from string_analyzer.exceptions import AlreadyExists
from string_analyzer.models.string import StringAnalysis
from string_analyzer.schemas.string import StringProperties, StringRecord
from string_analyzer.services.analyzer import compute_sha256

logger = logging.getLogger(__name__)


class StringStore(ABC):

    @abstractmethod
    def get(self, value: str) -> Optional[StringRecord]:
        """Exact-value lookup"""

    @abstractmethod
    def add(self, record: StringRecord) -> StringRecord:
        """Insert a record, raising AlreadyExists if its value is stored"""

    @abstractmethod
    def delete(self, value: str) -> bool:
        """Remove by exact value. Returns False if nothing was stored"""

    @abstractmethod
    def list(self) -> List[StringRecord]:
        """All records in creation order"""

    def count(self) -> int:
        return len(self.list())


class InMemoryStringStore(StringStore):
    """Dict-backed store guarded by a single lock."""

    def __init__(self):
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.Lock()

    def get(self, value: str) -> Optional[StringRecord]:
        with self._lock:
            return self._records.get(value)

    def add(self, record: StringRecord) -> StringRecord:
        with self._lock:
            if record.value in self._records:
                raise AlreadyExists("String already exists in the system")
            self._records[record.value] = record
            return record

    def delete(self, value: str) -> bool:
        with self._lock:
            return self._records.pop(value, None) is not None

    def list(self) -> List[StringRecord]:
        with self._lock:
            return list(self._records.values())

    def count(self) -> int:
        with self._lock:
            return len(self._records)


def _to_record(row: StringAnalysis) -> StringRecord:
    created_at = row.created_at
    if created_at.tzinfo is None:
        # SQLite drops the offset
        created_at = created_at.replace(tzinfo=timezone.utc)
    return StringRecord(
        id=row.id,
        value=row.value,
        properties=StringProperties(
            length=row.length,
            is_palindrome=row.is_palindrome,
            unique_characters=row.unique_characters,
            word_count=row.word_count,
            sha256_hash=row.sha256_hash,
            character_frequency_map=row.character_frequency_map,
        ),
        created_at=created_at,
    )


class SQLStringStore(StringStore):
    """SQLAlchemy-backed store. Uniqueness comes from the unique hash column."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = create_session_factory(engine)

    def _get_row(self, db, value: str) -> Optional[StringAnalysis]:
        row = db.query(StringAnalysis).filter(StringAnalysis.id == compute_sha256(value)).first()
        if row is None or row.value != value:
            return None
        return row

    def get(self, value: str) -> Optional[StringRecord]:
        with self.SessionLocal() as db:
            row = self._get_row(db, value)
            return _to_record(row) if row else None

    def add(self, record: StringRecord) -> StringRecord:
        props = record.properties
        db_string = StringAnalysis(
            id=record.id,
            value=record.value,
            length=props.length,
            is_palindrome=props.is_palindrome,
            unique_characters=props.unique_characters,
            word_count=props.word_count,
            sha256_hash=props.sha256_hash,
            character_frequency_map=props.character_frequency_map,
            created_at=record.created_at,
        )
        with self.SessionLocal() as db:
            db.add(db_string)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise AlreadyExists("String already exists in the system")
        return record

    def delete(self, value: str) -> bool:
        with self.SessionLocal() as db:
            row = self._get_row(db, value)
            if not row:
                return False
            db.delete(row)
            db.commit()
            return True

    def list(self) -> List[StringRecord]:
        with self.SessionLocal() as db:
            rows = (
                db.query(StringAnalysis)
                .order_by(StringAnalysis.seq)
                .all()
            )
            return [_to_record(row) for row in rows]

    def count(self) -> int:
        with self.SessionLocal() as db:
            return db.query(func.count(StringAnalysis.seq)).scalar()


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
_store: Optional[StringStore] = None
_store_lock = threading.Lock()


def build_store(backend: str = None, database_url: str = None) -> StringStore:
    """Build the store named by STORE_BACKEND ("memory" or "sql")."""
    backend = (backend or config.STORE_BACKEND).lower()
    if backend == "memory":
        logger.info("Using in-memory string store")
        return InMemoryStringStore()
    if backend == "sql":
        engine = create_db_engine(database_url)
        init_db(engine)
        logger.info(f"Using SQL string store ({engine.url.render_as_string(hide_password=True)})")
        return SQLStringStore(engine)
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def get_store() -> StringStore:
    """Dependency to provide the process-wide store."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = build_store()
    return _store
