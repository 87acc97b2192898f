"""
Centralized configuration management with validation.

All environment variables are loaded and validated here.
This ensures consistent configuration across the application.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation."""

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )

    # Database Configuration
    POSTGRES_USER: str = Field(default="postgres")
    POSTGRES_PASSWORD: str = Field(default="postgres")
    POSTGRES_DB: str = Field(default="wellness_app")
    POSTGRES_HOST: str = Field(default="postgres")
    POSTGRES_PORT: int = Field(default=5432)

    # Full URL override (sqlite:// for tests and local development)
    DATABASE_URL: Optional[str] = Field(default=None)

    # Database Pool Configuration
    DB_POOL_SIZE: int = Field(default=10)
    DB_MAX_OVERFLOW: int = Field(default=10)
    DB_POOL_TIMEOUT: int = Field(default=30)
    DB_POOL_RECYCLE: int = Field(default=3600)  # 1 hour

    # Session token validation - REQUIRED
    # Tokens are issued by the auth provider; this service only verifies them.
    SECRET_KEY: str = Field(
        default=...,  # Required - no default
        description="JWT signing key shared with the auth provider (32+ chars)."
    )

    # API Configuration
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    API_RELOAD: bool = Field(default=False)

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="json")  # json or text

    # Environment
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    EXPOSE_API_DOCS: bool = Field(default=False)

    # CORS - comma-separated list of allowed origins for production
    CORS_ORIGINS: Optional[str] = Field(default=None)

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = Field(default=None)
    SENTRY_TRACES_SAMPLE_RATE: float = Field(default=0.1)  # 10% of transactions

    # --- Wellness domain ---
    # Preferences owner when the request carries no session (single-user mode)
    DEFAULT_PREFERENCES_USER_ID: str = Field(default="default_user")
    # Trending compares two back-to-back windows of this many days
    TRENDING_WINDOW_DAYS: int = Field(default=7, ge=1)
    TRENDING_LIMIT: int = Field(default=5, ge=1)
    STATS_WINDOW_DAYS: int = Field(default=30, ge=1)
    PREMIUM_SUBSCRIPTION_DAYS: int = Field(default=30, ge=1)
    # Per-process theme caches, one per preferences key
    THEME_STORE_MAX_ENTRIES: int = Field(default=1024, ge=1)

    # Text generation (weekly quotes, admin writing tools)
    OPENAI_API_KEY: Optional[str] = Field(default=None)
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")

    # Admin image uploads, served back from /uploads
    UPLOADS_DIR: str = Field(default="uploads")
    UPLOAD_MAX_FILE_BYTES: int = Field(default=10 * 1024 * 1024, ge=1)


# Global settings instance
settings = Settings()
