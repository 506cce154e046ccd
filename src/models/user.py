"""User model."""

from sqlalchemy import Column, String, Text

from src.database import Base
from src.models.mixins import DocumentMixin


class User(Base, DocumentMixin):
    """User account that owns tasks and logs in with email and password."""

    __tablename__ = "usuarios"

    email = Column(Text, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
