"""User management schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserDelete(BaseModel):
    """Delete request; the target id travels in the body."""

    id: int | None = None


class UserEmailUpdate(BaseModel):
    """Email update request."""

    id: int | None = None
    email: str | None = None


class UserResponse(BaseModel):
    """User information response. Never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str | None
    created_at: datetime | None


class UserListResponse(BaseModel):
    """All users."""

    success: bool = True
    users: list[UserResponse]


class MessageResponse(BaseModel):
    """Success acknowledgement."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Failure body shared by every JSON endpoint."""

    success: bool = False
    error: str
