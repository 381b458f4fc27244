"""User model."""

from sqlalchemy import Column, Integer, String

from account_service.database import Base
from account_service.models.mixins import CreatedAtMixin


class User(Base, CreatedAtMixin):
    """User account with a bcrypt password hash."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(100), nullable=True)
