"""Pydantic schemas for API request/response validation."""

from src.schemas.auth import (
    LoginResponse,
    RegisterResponse,
    UserLogin,
    UserProfile,
    UserRegister,
)
from src.schemas.task import (
    MessageResponse,
    TaskCreate,
    TaskCreatedResponse,
    TaskResponse,
    TaskUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserProfile",
    "RegisterResponse",
    "LoginResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "TaskCreatedResponse",
    "MessageResponse",
]
