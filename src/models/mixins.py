"""Mixins for SQLAlchemy models."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, String, func


def new_document_id() -> str:
    """Generate an opaque document identifier."""
    return uuid4().hex


class DocumentMixin:
    """Mixin for store-assigned identifiers and bookkeeping timestamps."""

    id = Column(String(32), primary_key=True, default=new_document_id)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
