"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=3306)
    db_user: str = Field(default="root")
    db_password: str = Field(default="")
    db_name: str = Field(default="gym_data")
    db_driver: str = Field(default="mysql+pymysql")
    database_url: str | None = Field(default=None)

    # Connection pool
    db_pool_size: int = Field(default=10, ge=1)
    db_pool_timeout: float = Field(default=30, gt=0)

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Server
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=8000)
    log_level: str = Field(default="INFO")
    environment: str = Field(default="development")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production" and not self.database_url:
            if not self.db_password:
                raise ValueError("DB_PASSWORD must be set in production")
        return self

    @property
    def sqlalchemy_url(self) -> str | URL:
        """Connection URL, either the explicit override or built from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
