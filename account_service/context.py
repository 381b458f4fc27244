"""Application context holding the connection pool and shared services."""

import logging
from dataclasses import dataclass

from sqlalchemy import Engine

from account_service.config import Settings
from account_service.database import create_db_engine
from account_service.services.auth import PasswordHasher
from account_service.services.users import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Resources built once at startup and handed to request handlers."""

    engine: Engine
    users: UserRepository
    hasher: PasswordHasher

    @classmethod
    def create(cls, settings: Settings) -> "AppContext":
        """Build the pool, repository and hasher from settings."""
        engine = create_db_engine(settings)
        return cls(
            engine=engine,
            users=UserRepository(engine),
            hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        )

    def start(self) -> None:
        """Verify the store is reachable, then make sure the schema exists.

        Any connectivity failure propagates so the server never starts listening.
        """
        try:
            self.users.check_connection()
        except Exception:
            logger.critical("Database connection failed", exc_info=True)
            raise
        logger.info("Connected to database")

        self.users.ensure_schema()
        logger.info("Database tables initialized")

    def close(self) -> None:
        """Drain and close every pooled connection."""
        self.engine.dispose()
        logger.info("Database connections closed")
