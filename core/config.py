"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import Optional
from urllib.parse import quote

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="Todolist Service", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=True, alias="DEBUG")

    # API Service
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=10000, alias="API_PORT")

    # TLS is optional; both files must be set to serve over https
    ssl_certfile: Optional[str] = Field(default=None, alias="SSL_CERTFILE")
    ssl_keyfile: Optional[str] = Field(default=None, alias="SSL_KEYFILE")

    # PostgreSQL Settings
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    database_host: str = Field(default="localhost", alias="DATABASE_HOSTNAME")
    database_port: int = Field(default=5432, alias="DATABASE_PORT")
    database_user: str = Field(default="postgres", alias="DATABASE_USERNAME")
    database_password: str = Field(default="postgres", alias="DATABASE_PASSWORD")
    database_name: str = Field(default="todolist", alias="DATABASE_NAME")
    database_min_pool_size: int = Field(default=0, alias="DATABASE_MIN_POOL_SIZE")
    database_max_pool_size: int = Field(default=10, alias="DATABASE_MAX_POOL_SIZE")
    database_command_timeout: float = Field(
        default=30.0, alias="DATABASE_COMMAND_TIMEOUT"
    )  # seconds, applied to every statement
    database_connect_retries: int = Field(default=3, alias="DATABASE_CONNECT_RETRIES")
    database_auto_migrate: bool = Field(default=True, alias="DATABASE_AUTO_MIGRATE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="logs", alias="LOG_DIR")

    @property
    def database_dsn(self) -> str:
        """Construct PostgreSQL DSN, preferring DATABASE_URL when provided."""
        if self.database_url:
            return self.database_url

        return (
            f"postgresql://{quote(self.database_user, safe='')}"
            f":{quote(self.database_password, safe='')}"
            f"@{self.database_host}:{self.database_port}/{self.database_name}"
        )

    @property
    def tls_enabled(self) -> bool:
        return bool(self.ssl_certfile and self.ssl_keyfile)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
