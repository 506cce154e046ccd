"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import get_settings
from src.exceptions import InvalidCredentials, MissingFields
from src.services.store import USERS, DocumentStore

logger = logging.getLogger(__name__)


@lru_cache
def get_pwd_context() -> CryptContext:
    """Password hashing context using bcrypt at the configured cost."""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds,
    )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return get_pwd_context().verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return get_pwd_context().hash(password)


def create_access_token(subject_id: str) -> str:
    """Create a signed JWT for the given account id."""
    settings = get_settings()
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(subject_id),
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(
    store: DocumentStore,
    email: str | None,
    password: str | None,
    phone: str | None,
    name: str | None,
) -> str:
    """Create a user account and return its id.

    The password is stored only as a bcrypt hash. The other fields are
    stored as given.
    """
    if not email or not password or not phone or not name:
        raise MissingFields("Incomplete data!")

    user_id = store.add(
        USERS,
        {
            "email": email,
            "password_hash": get_password_hash(password),
            "phone": phone,
            "name": name,
        },
    )
    logger.info(f"Registered user {user_id}")
    return user_id


def authenticate_user(
    store: DocumentStore, email: str | None, password: str | None
) -> dict[str, Any]:
    """Check credentials and issue a token.

    Returns ``{"token": str, "profile": {"id", "email", "name"}}``.
    An unknown email and a wrong password both raise the same
    ``InvalidCredentials`` error.
    """
    if not email or not password:
        raise MissingFields("Email and password are required!")

    matches = store.where(USERS, "email", normalize_email(email))
    if not matches:
        # Same bcrypt cost as a wrong password
        get_pwd_context().dummy_verify()
        logger.info("Login failed: unknown email")
        raise InvalidCredentials()

    user = matches[0]
    if not verify_password(password, user.data["password_hash"]):
        logger.info(f"Login failed: wrong password for user {user.id}")
        raise InvalidCredentials()

    logger.info(f"User {user.id} logged in")
    return {
        "token": create_access_token(user.id),
        "profile": {
            "id": user.id,
            "email": user.data["email"],
            "name": user.data["name"],
        },
    }
