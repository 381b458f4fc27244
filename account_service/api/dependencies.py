"""FastAPI dependencies for shared services."""

from fastapi import Request

from account_service.context import AppContext
from account_service.services.auth import PasswordHasher
from account_service.services.users import UserRepository


def get_context(request: Request) -> AppContext:
    """Get the application context built at startup."""
    return request.app.state.context


def get_user_repository(request: Request) -> UserRepository:
    """Get the user repository."""
    return get_context(request).users


def get_password_hasher(request: Request) -> PasswordHasher:
    """Get the password hasher."""
    return get_context(request).hasher
