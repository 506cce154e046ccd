"""Document store adapter over SQLAlchemy.

Records live in named collections and are addressed by a store-assigned id.
Each collection maps onto one model; documents are exchanged as plain dicts.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.exceptions import PersistenceFailure
from src.models.task import Task
from src.models.user import User

logger = logging.getLogger(__name__)

USERS = "usuarios"
TASKS = "tarefas"

COLLECTIONS: dict[str, Any] = {
    USERS: User,
    TASKS: Task,
}

# Bookkeeping columns that are not part of a document's data
_RESERVED = {"id", "created_at", "updated_at"}


@dataclass
class Document:
    """A stored record: its id plus its fields."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


class DocumentStore:
    """Collection-scoped insert, get, query, update and delete."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, collection: str, data: dict[str, Any]) -> str:
        """Insert a document and return its new id."""
        model = self._model(collection)
        record = model(**data)
        try:
            self.db.add(record)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(f"insert into {collection}", e)
        return record.id

    def get(self, collection: str, document_id: str) -> Document | None:
        """Get a document by id, or None if it does not exist."""
        model = self._model(collection)
        try:
            record = self.db.query(model).filter(model.id == document_id).first()
        except SQLAlchemyError as e:
            self._fail(f"get from {collection}", e)
        return _to_document(record) if record is not None else None

    def where(self, collection: str, field_name: str, value: Any) -> list[Document]:
        """Get all documents whose field equals value."""
        model = self._model(collection)
        column = getattr(model, field_name)
        try:
            records = self.db.query(model).filter(column == value).order_by(model.created_at).all()
        except SQLAlchemyError as e:
            self._fail(f"query {collection}", e)
        return [_to_document(record) for record in records]

    def update(self, collection: str, document_id: str, data: dict[str, Any]) -> None:
        """Merge fields into an existing document."""
        model = self._model(collection)
        try:
            self.db.query(model).filter(model.id == document_id).update(
                data, synchronize_session=False
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(f"update {collection}", e)

    def delete(self, collection: str, document_id: str) -> None:
        """Delete a document by id."""
        model = self._model(collection)
        try:
            self.db.query(model).filter(model.id == document_id).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(f"delete from {collection}", e)

    def _model(self, collection: str) -> Any:
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection}") from None

    def _fail(self, action: str, error: SQLAlchemyError) -> None:
        self.db.rollback()
        logger.error(f"Store failed to {action}: {error}")
        raise PersistenceFailure() from error


def _to_document(record: Any) -> Document:
    data = {
        attr.key: getattr(record, attr.key)
        for attr in inspect(record).mapper.column_attrs
        if attr.key not in _RESERVED
    }
    return Document(id=record.id, data=data)
