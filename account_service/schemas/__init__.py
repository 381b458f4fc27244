"""Pydantic schemas for API request/response validation."""

from account_service.schemas.auth import AuthResponse, UserLogin, UserRegister
from account_service.schemas.user import (
    ErrorResponse,
    MessageResponse,
    UserDelete,
    UserEmailUpdate,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "MessageResponse",
    "UserDelete",
    "UserEmailUpdate",
    "UserListResponse",
    "UserLogin",
    "UserRegister",
    "UserResponse",
]
