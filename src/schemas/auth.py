"""Authentication schemas.

Request fields are optional so that missing values are reported by the
services as a 400 rather than a validation error.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRegister(BaseModel):
    """User registration request."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    password: str | None = Field(None, alias="senha")
    phone: str | None = Field(None, alias="telefone")
    name: str | None = Field(None, alias="nome")


class UserLogin(BaseModel):
    """User login request."""

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = None
    password: str | None = Field(None, alias="senha")


class RegisterResponse(BaseModel):
    """Registration response with the new user's id."""

    message: str
    id: str


class UserProfile(BaseModel):
    """Public user information."""

    id: str
    email: str
    name: str


class LoginResponse(BaseModel):
    """Login response with token and profile."""

    message: str
    token: str
    profile: UserProfile
