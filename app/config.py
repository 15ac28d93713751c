"""
FitCoach settings, loaded from the environment or a .env file.

Secrets (hook secret, Gemini key) only ever come from here.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="FitCoach", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Database settings
    database_url: str = Field(
        default="postgresql+psycopg2://user@localhost:5432/fitcoach",
        description="SQLAlchemy database URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Identity collaborator
    identity_header: str = Field(
        default="X-User-Id",
        description="Header carrying the authenticated account id, set by the identity proxy",
    )
    account_hook_secret: Optional[str] = Field(
        default=None,
        description="Shared secret the identity provider sends with account lifecycle hooks",
    )

    # Nutrition estimation (vision/LLM upstream)
    gemini_api_key: Optional[str] = Field(
        default=None, description="API key for the Gemini generateContent endpoint"
    )
    gemini_api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Gemini API",
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash", description="Vision-capable model name"
    )
    nutrition_timeout_sec: float = Field(
        default=30.0, gt=0, description="Timeout for one upstream estimation call"
    )
    nutrition_max_retries: int = Field(
        default=2, ge=0, description="Retries on transient upstream failures"
    )
    nutrition_backoff_sec: float = Field(
        default=0.5, ge=0, description="Base delay for exponential backoff"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="FitCoach API", description="API documentation title"
    )
    api_description: str = Field(
        default="Trainer and client coaching: programs, food plans, chat and progress",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Routers are mounted under the prefix, so keep one leading and no trailing slash"""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def nutrition_enabled(self) -> bool:
        return bool(self.gemini_api_key)

    def gemini_generate_url(self) -> str:
        """Full generateContent URL for the configured model"""
        return f"{self.gemini_api_base.rstrip('/')}/models/{self.gemini_model}:generateContent"


# Global settings instance
settings = Settings()
