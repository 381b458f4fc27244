"""User management API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from account_service.api.body import parse_body
from account_service.api.dependencies import get_user_repository
from account_service.api.errors import INTERNAL_ERROR
from account_service.schemas.user import (
    MessageResponse,
    UserDelete,
    UserEmailUpdate,
    UserListResponse,
    UserResponse,
)
from account_service.services.users import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _internal_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.get("/users", response_model=UserListResponse)
def get_users(users: Annotated[UserRepository, Depends(get_user_repository)]):
    """Get every user without password hashes."""
    try:
        rows = users.list_users()
    except Exception as e:
        logger.exception("Fetch users error")
        raise _internal_error() from e

    return UserListResponse(users=[UserResponse.model_validate(row) for row in rows])


@router.delete("/user", response_model=MessageResponse)
def delete_user(
    data: Annotated[UserDelete, Depends(parse_body(UserDelete))],
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Delete a user permanently."""
    if not data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User ID required")

    try:
        deleted = users.delete_user_by_id(data.id)
    except Exception as e:
        logger.exception("Delete error")
        raise _internal_error() from e

    if deleted == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return MessageResponse(message="User deleted")


@router.put("/user", response_model=MessageResponse)
def update_email(
    data: Annotated[UserEmailUpdate, Depends(parse_body(UserEmailUpdate))],
    users: Annotated[UserRepository, Depends(get_user_repository)],
):
    """Change a user's email."""
    if not data.id or not data.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ID and new email required",
        )

    try:
        updated = users.update_email_by_id(data.id, data.email)
    except Exception as e:
        logger.exception("Update error")
        raise _internal_error() from e

    if updated == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return MessageResponse(message="Email updated")
