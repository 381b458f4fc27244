"""Authentication schemas."""

from pydantic import BaseModel


class UserRegister(BaseModel):
    """User registration request."""

    name: str | None = None
    password: str | None = None
    email: str | None = None


class UserLogin(BaseModel):
    """User login request."""

    name: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    """Successful register or login."""

    success: bool = True
    message: str
    id: int
    userId: int  # noqa: N815
