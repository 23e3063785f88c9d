"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - sqlalchemy_url always names an async driver

Design Decisions:
    - DATABASE_URL wins when set; otherwise the URL is assembled from the
      DB_USER / DB_PASSWORD / DB_HOST / DB_PORT / DB_NAME variables that
      existing deployments already export
    - Hash cost lives inside password_hash_method (werkzeug method string)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str | None = None
    db_user: str = "planner"
    db_password: str = "planner"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "planner"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Password hashing
    password_hash_method: str = "pbkdf2:sha256:600000"
    password_salt_length: int = 16

    # API
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 1000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
