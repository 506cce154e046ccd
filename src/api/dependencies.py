"""FastAPI dependencies for the store and services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.store import DocumentStore
from src.services.tasks import TaskService


def get_store(
    db: Annotated[Session, Depends(get_db)],
) -> DocumentStore:
    """Get document store bound to the request's session."""
    return DocumentStore(db)


def get_task_service(
    store: Annotated[DocumentStore, Depends(get_store)],
) -> TaskService:
    """Get task service with dependencies."""
    return TaskService(store)
