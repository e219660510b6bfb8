"""Configuration management for shortlink."""

from typing import Literal, Optional
from urllib.parse import quote

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

ALLOWED_REDIRECT_STATUSES = (301, 302, 303, 307, 308)


class Config(BaseSettings):
    """Application configuration."""

    # Storage settings
    storage_backend: Literal["memory", "postgres"] = Field(
        default="memory",
        description="Mapping store: 'memory' (in-process) or 'postgres' (relational table)"
    )

    database_url: Optional[str] = Field(
        default=None,
        description="Full PostgreSQL DSN; overrides the individual db_* settings"
    )

    db_user: str = Field(
        default="postgres",
        validation_alias=AliasChoices("db_user", "dbuser"),
        description="Database user"
    )

    db_password: str = Field(
        default="",
        validation_alias=AliasChoices("db_password", "dbpass"),
        description="Database password"
    )

    db_host: str = Field(default="127.0.0.1", description="Database host")

    db_port: int = Field(default=5432, description="Database port")

    db_name: str = Field(default="shortlinks", description="Database name")

    database_create_tables: bool = Field(
        default=False,
        description="Create the short_links table on startup if missing"
    )

    db_pool_max_size: int = Field(default=10, ge=1, description="Maximum pool size")

    db_timeout_seconds: float = Field(
        default=30,
        gt=0,
        description="Connection and command timeout in seconds"
    )

    # Redis settings (optional)
    redis_url: Optional[str] = Field(
        default=None,
        description="Redis connection URL for caching"
    )

    cache_ttl_seconds: int = Field(default=3600, ge=1, description="Cache TTL in seconds")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Host to bind to")

    port: int = Field(default=8080, description="Port to listen on")

    shutdown_timeout_seconds: int = Field(
        default=5,
        ge=0,
        description="Grace period for in-flight requests after SIGINT/SIGTERM"
    )

    # Shortener settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL for generating short URLs"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc12)"
    )

    short_code_length: int = Field(
        default=5,
        ge=1,
        le=16,
        description="Length of generated short codes"
    )

    max_allocation_attempts: int = Field(
        default=20,
        ge=1,
        description="Maximum candidate codes tried before giving up"
    )

    redirect_status: Optional[int] = Field(
        default=None,
        description="Redirect status code; unset uses 302 for memory, 301 for postgres"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(default=False, description="Use JSON format for logs")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("redirect_status")
    @classmethod
    def validate_redirect_status(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v not in ALLOWED_REDIRECT_STATUSES:
            raise ValueError(f"redirect_status must be one of {ALLOWED_REDIRECT_STATUSES}")
        return v

    @property
    def redirect_status_code(self) -> int:
        """Configured redirect status, or the backend's historical default."""
        if self.redirect_status is not None:
            return self.redirect_status
        return 301 if self.storage_backend == "postgres" else 302

    @property
    def database_dsn(self) -> str:
        """PostgreSQL DSN, from database_url or composed from the db_* parts."""
        if self.database_url:
            return self.database_url
        credentials = quote(self.db_user, safe="")
        if self.db_password:
            credentials += ":" + quote(self.db_password, safe="")
        return f"postgresql://{credentials}@{self.db_host}:{self.db_port}/{self.db_name}"

    def safe_dump(self) -> dict:
        """Config as a dict with secrets masked, for logging."""
        data = self.model_dump()
        if data.get("db_password"):
            data["db_password"] = "***"
        if data.get("database_url"):
            data["database_url"] = "***"
        return data


def load_config(**overrides) -> Config:
    """Load configuration from environment."""
    return Config(**overrides)
