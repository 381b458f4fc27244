"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from passlib.exc import PasswordValueError

from account_service.api.body import parse_body
from account_service.api.dependencies import get_password_hasher, get_user_repository
from account_service.api.errors import INTERNAL_ERROR
from account_service.schemas.auth import AuthResponse, UserLogin, UserRegister
from account_service.services.auth import PasswordHasher
from account_service.services.users import DuplicateUserError, UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

MIN_PASSWORD_LENGTH = 6


def password_length(password: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(password.encode("utf-16-le")) // 2


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: Annotated[UserRegister, Depends(parse_body(UserRegister))],
    users: Annotated[UserRepository, Depends(get_user_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
):
    """Register a new user."""
    if not user_data.name or not user_data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name and password required",
        )

    if password_length(user_data.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        )

    try:
        # Best-effort pre-check; the unique constraint is what actually guards the name
        if users.find_id_by_name(user_data.name) is not None:
            raise DuplicateUserError(user_data.name)

        user_id = users.insert_user(
            user_data.name, hasher.hash(user_data.password), user_data.email or None
        )
    except DuplicateUserError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already exists",
        ) from e
    except PasswordValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password contains characters that are not allowed",
        ) from e
    except Exception as e:
        logger.exception("Register error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR,
        ) from e

    return AuthResponse(message="Account created", id=user_id, userId=user_id)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: Annotated[UserLogin, Depends(parse_body(UserLogin))],
    users: Annotated[UserRepository, Depends(get_user_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
):
    """Check a name/password pair."""
    if not credentials.name or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name and password required",
        )

    try:
        user = users.find_id_and_password_by_name(credentials.name)
        authenticated = user is not None and hasher.verify(credentials.password, user.password)
    except PasswordValueError:
        # No stored hash can match a password bcrypt refuses to process
        authenticated = False
    except Exception as e:
        logger.exception("Login error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR,
        ) from e

    # Same message for unknown names and wrong passwords
    if not authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return AuthResponse(message="Login successful", id=user.id, userId=user.id)
