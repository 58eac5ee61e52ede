"""
Generic record repository on top of a SQLAlchemy session.

Every model exposes an ``id`` string column and an ``id_prefix`` class
attribute. An empty ``id`` means the record has not been persisted yet;
upsert assigns a fresh prefixed identifier in that case.
"""

import copy
import logging
import uuid
from enum import Enum
from typing import Any, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import Base, utcnow
from ..exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class UpdateSource(str, Enum):
    """Origin of a mutation, passed along for change tracking."""
    WINDOW = "window"
    PLUGIN = "plugin"
    BACKGROUND = "background"
    IMPORT = "import"
    SYNC = "sync"


def generate_id(prefix: str) -> str:
    """Generate a new record identifier such as ``rq_1a2b3c4d5e``."""
    return f"{prefix}_{uuid.uuid4().hex[:10]}"


def clone_record(record: ModelT) -> ModelT:
    """
    Return a detached copy of a record with every column value copied.

    JSON values are deep-copied so the clone never shares mutable state
    with the source. Timestamps are left to their column defaults.
    """
    mapper = inspect(type(record))
    values: dict[str, Any] = {}
    for attr in mapper.column_attrs:
        if attr.key in ("created_at", "updated_at"):
            continue
        values[attr.key] = copy.deepcopy(getattr(record, attr.key))
    return type(record)(**values)


class Repository:
    """Keyed CRUD primitives shared by every entity kind."""

    def __init__(self, db: Session):
        self.db = db

    def find_one(self, model: type[ModelT], field: str, value: Any) -> ModelT:
        """
        Return the single record whose ``field`` equals ``value``.

        Raises:
            ResourceNotFoundError: if no record matches
        """
        record = (
            self.db.query(model)
            .filter(getattr(model, field) == value)
            .first()
        )
        if record is None:
            raise ResourceNotFoundError(model.__name__, value)
        return record

    def find_many(
        self,
        model: type[ModelT],
        field: str,
        value: Any,
        limit: int | None = None,
    ) -> list[ModelT]:
        """Return every record whose ``field`` equals ``value``, in no particular order."""
        query = self.db.query(model).filter(getattr(model, field) == value)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def upsert(self, record: ModelT, source: UpdateSource) -> ModelT:
        """Insert or update a record and return the persisted instance."""
        if not record.id:
            record.id = generate_id(type(record).id_prefix)
        record.updated_at = utcnow()
        try:
            persisted = self.db.merge(record)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(persisted)
        logger.debug(
            "Upserted %s %s (source=%s)",
            type(record).__name__, persisted.id, UpdateSource(source).value,
        )
        return persisted

    def delete(self, record: ModelT, source: UpdateSource) -> ModelT:
        """Delete a record and return it."""
        record_id = record.id
        try:
            self.db.delete(record)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.debug(
            "Deleted %s %s (source=%s)",
            type(record).__name__, record_id, UpdateSource(source).value,
        )
        return record
