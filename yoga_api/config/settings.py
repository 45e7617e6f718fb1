"""
Application settings and configuration for the API service.
"""

from datetime import timedelta
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


INSECURE_JWT_SECRETS = (
    "CHANGE_ME_IN_PRODUCTION",
    "dev-secret-key-change-in-production",
)


class AppSettings(BaseSettings):
    """Application configuration settings."""

    # Environment
    environment: str = Field(
        default="development", description="Application environment"
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8080, description="API port")
    api_reload: bool = Field(default=True, description="Enable API reload")
    api_log_level: str = Field(default="info", description="API log level")

    # Security
    jwt_secret_key: str = Field(
        default="CHANGE_ME_IN_PRODUCTION",
        description="JWT secret key - must be set via environment variable",
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT algorithm")
    jwt_expiration_hours: int = Field(
        default=24, gt=0, description="JWT expiration in hours"
    )
    bcrypt_rounds: int = Field(
        default=12, ge=4, le=31, description="bcrypt cost factor"
    )

    # Database
    database_url: Optional[str] = Field(
        default=None, description="Full database URL, overrides the parts below"
    )
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "yoga"
    db_user: str = "yoga"
    db_password: str = "ChangeMe"
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600
    echo_sql: bool = False

    # CORS
    cors_origins: str = Field(
        default="http://localhost:4200,http://127.0.0.1:4200",
        description="CORS allowed origins (comma-separated)",
    )

    # Rate Limiting
    rate_limit_enabled: bool = Field(default=True, description="Enable rate limiting")
    auth_rate_limit: str = Field(
        default="10/minute", description="Authentication rate limit"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Application log level")
    log_format: str = Field(default="json", description="Log format")
    audit_log_enabled: bool = Field(default=True, description="Enable audit logging")

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore", frozen=True
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def database_url_computed(self) -> str:
        """Construct database URL from settings."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def jwt_lifetime(self) -> timedelta:
        """Token lifetime as a timedelta."""
        return timedelta(hours=self.jwt_expiration_hours)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache()
def get_app_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()


# Convenience function for getting settings
def get_settings() -> AppSettings:
    """Get application settings."""
    return get_app_settings()
