"""Mixins for SQLAlchemy models."""

from sqlalchemy import TIMESTAMP, Column, func


class CreatedAtMixin:
    """Mixin to add a created_at column set once by the store on insert."""

    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=True)
