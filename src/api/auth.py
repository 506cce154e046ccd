"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_store
from src.schemas.auth import LoginResponse, RegisterResponse, UserLogin, UserRegister
from src.services.auth import authenticate_user, register_user
from src.services.store import DocumentStore

router = APIRouter(tags=["auth"])


@router.post("/api/addUser", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    store: Annotated[DocumentStore, Depends(get_store)],
):
    """Register a new user."""
    user_id = register_user(
        store,
        user_data.email,
        user_data.password,
        user_data.phone,
        user_data.name,
    )
    return RegisterResponse(message="User registered successfully!", id=user_id)


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    store: Annotated[DocumentStore, Depends(get_store)],
):
    """Login with email and password."""
    result = authenticate_user(store, credentials.email, credentials.password)
    return LoginResponse(message="Login successful!", **result)
