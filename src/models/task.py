"""Task model."""

from sqlalchemy import Column, DateTime, Text

from src.database import Base
from src.models.mixins import DocumentMixin


class Task(Base, DocumentMixin):
    """Scheduled task belonging to a user.

    ``owner_id`` references a user by value only; no foreign key is enforced.
    ``scheduled_at`` is stored as naive UTC.
    """

    __tablename__ = "tarefas"

    owner_id = Column(Text, nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    scheduled_at = Column(DateTime, nullable=False)
