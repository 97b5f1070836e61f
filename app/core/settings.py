"""Application settings and configuration."""

from functools import lru_cache
from typing import ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Instances are frozen: configuration is read once at startup and passed
    to the components that need it.
    """

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = Field(default="Auralink API", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Host to bind to")
    port: int = Field(default=5000, description="Port to bind to")
    log_level: str = Field(default="INFO", description="Root logging level")

    # CORS
    allowed_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:5174",
        ],
        description="Allowed CORS origins",
    )

    # Rate limiting
    rate_limit_enabled: bool = Field(
        default=True, description="Enable the per-client request rate limit"
    )
    rate_limit: str = Field(
        default="100/minute",
        description="Requests allowed per client address, shared across all routes",
    )

    # Security
    secret_key: str = Field(
        default="your-secret-key-change-in-production",
        description="Secret key for JWT tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_seconds: int = Field(
        default=604800, description="Access token lifetime in seconds (7 days)"
    )

    # PostgreSQL Database
    postgres_user: str = Field(default="admin", description="PostgreSQL user")
    postgres_password: str = Field(
        default="supersecretpassword", description="PostgreSQL password"
    )
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    postgres_db: str = Field(default="auralink", description="PostgreSQL database name")
    database_url_override: str | None = Field(
        default=None,
        description="Full SQLAlchemy async URL, takes precedence over the postgres_* parts",
    )

    @property
    def database_url(self) -> str:
        """Construct database URL from individual components."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    # Google identity
    google_client_id: str | None = Field(
        default=None, description="OAuth client id used as the ID token audience"
    )

    # Insight generation (OpenAI compatible endpoint, OpenRouter by default)
    insight_provider_api_key: str | None = Field(
        default=None, description="API key for the text generation provider"
    )
    insight_provider_base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="Base URL of the OpenAI compatible provider",
    )
    insight_model: str = Field(
        default="openai/gpt-4o-mini", description="Model used for generated insights"
    )
    insight_max_tokens: int = Field(default=1000, description="Completion token cap")
    insight_app_title: str = Field(
        default="Auralink", description="X-Title header sent to the provider"
    )
    frontend_url: str = Field(
        default="http://localhost:3000",
        description="HTTP-Referer header sent to the provider",
    )
    insight_default_confidence: float = Field(
        default=0.85,
        ge=0,
        le=1,
        description="Confidence stored on generated insights",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
