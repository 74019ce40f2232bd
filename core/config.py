"""
Application configuration using Pydantic Settings.

Supports loading from environment variables and .env files.
"""

from functools import lru_cache
from typing import Optional, List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "change-me-in-production-use-a-long-random-string"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============ Application ============
    app_name: str = "Prompt Gallery"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # ============ Server ============
    host: str = "0.0.0.0"
    port: int = 8000

    # ============ Security / Session ============
    secret_key: str = DEFAULT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    session_expire_hours: int = 24
    session_cookie_name: str = "session"

    # Single admin account allowed to curate the gallery
    admin_email: Optional[str] = None
    admin_password: Optional[str] = None

    # ============ CORS ============
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # ============ Database ============
    database_enabled: bool = True
    database_url: Optional[str] = None
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_echo: bool = False

    # ============ Object Storage ============
    storage_backend: str = "local"  # local, minio
    storage_bucket: str = "prompts"
    storage_public_url: Optional[str] = None
    storage_local_path: str = "outputs/storage"

    minio_endpoint: Optional[str] = None
    minio_access_key: Optional[str] = None
    minio_secret_key: Optional[str] = None
    minio_use_ssl: bool = False

    # ============ Google Gemini API ============
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "google_api_key"),
    )
    gemini_model: str = "gemini-2.5-flash"

    # Where the analyzer client reaches the analysis proxy
    analysis_endpoint_url: str = "http://127.0.0.1:8000/api/analyze"

    # ============ Image Preprocessing ============
    image_max_dimension: int = 800
    image_jpeg_quality: int = 70
    image_max_upload_bytes: int = 20 * 1024 * 1024

    # ============ Logging ============
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def uses_default_secret_key(self) -> bool:
        """Sessions are signed with the published default key."""
        return self.secret_key == DEFAULT_SECRET_KEY

    @property
    def is_database_configured(self) -> bool:
        """Check if a database connection is configured."""
        return bool(self.database_enabled and self.database_url)

    @property
    def is_auth_configured(self) -> bool:
        """Check if admin credentials are configured."""
        return all([
            self.admin_email,
            self.admin_password,
        ])

    @property
    def is_gemini_configured(self) -> bool:
        """Check if the Gemini credential is present."""
        return bool(self.gemini_api_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
