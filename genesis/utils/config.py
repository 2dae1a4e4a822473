"""Type-safe environment configuration using Pydantic Settings."""

from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Required fields will raise validation errors if missing.
    Optional fields have sensible defaults.
    Secrets are masked in string representations and may be absent;
    the client that needs one raises ConfigurationError at call time.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
        env_ignore_empty=True,
    )

    # Required fields - will raise error if missing
    APP_NAME: str = Field(
        ...,
        description="Application name"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        ...,
        description="Application environment"
    )

    # Optional fields with defaults
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    DEBUG: bool = Field(
        default=False,
        description="Debug mode flag"
    )

    API_TIMEOUT: int = Field(
        default=30,
        description="HTTP timeout in seconds for search and WordPress calls",
        gt=0
    )

    # Search results API
    SERPAPI_ENDPOINT: str = Field(
        default="https://serpapi.com/search.json",
        description="Search results API endpoint"
    )

    SERP_ENGINE: str = Field(
        default="google",
        description="Search engine queried through SerpAPI"
    )

    SERP_NUM_RESULTS: int = Field(
        default=15,
        description="Number of organic results requested per topic",
        gt=0
    )

    SERP_COUNTRY: str = Field(
        default="br",
        description="Search locale country (gl)"
    )

    SERP_LANGUAGE: str = Field(
        default="pt-br",
        description="Search locale language (hl)"
    )

    # Generative language endpoint
    LLM_PROVIDER: Literal["gemini", "openai"] = Field(
        default="gemini",
        description="LiteLLM provider used for generation"
    )

    LLM_DEFAULT_MODEL: str = Field(
        default="gemini-2.5-flash",
        description="Model used for article and meta description generation"
    )

    LLM_TIMEOUT: int = Field(
        default=120,
        description="Generation request timeout in seconds",
        gt=0
    )

    LLM_MAX_ATTEMPTS: int = Field(
        default=5,
        description="Maximum generation attempts when rate limited",
        ge=1
    )

    LLM_RETRY_DELAY: float = Field(
        default=1.0,
        description="Base delay in seconds for rate-limit backoff (doubles per attempt)",
        ge=0
    )

    # WordPress
    WP_SITE_URL: str | None = Field(
        default=None,
        description="WordPress site URL used for internal links and publishing"
    )

    WP_USERNAME: str | None = Field(
        default=None,
        description="WordPress user owning the application password"
    )

    WP_POSTS_CACHE_TTL: int = Field(
        default=300,
        description="Seconds a fetched post list is reused before refetching",
        ge=0
    )

    # Blueprint cache
    BLUEPRINT_CACHE_SIZE: int = Field(
        default=128,
        description="Maximum number of topics kept in the blueprint cache",
        gt=0
    )

    BLUEPRINT_CACHE_NORMALIZE_KEYS: bool = Field(
        default=False,
        description="Collapse case and whitespace in blueprint cache keys"
    )

    # Secret fields - masked in repr
    SERPAPI_API_KEY: SecretStr | None = Field(
        default=None,
        description="SerpAPI key"
    )

    GEMINI_API_KEY: SecretStr | None = Field(
        default=None,
        description="API key for the generative language endpoint"
    )

    WP_APP_PASSWORD: SecretStr | None = Field(
        default=None,
        description="WordPress application password"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_levels}, got '{v}'"
            )
        return v_upper

    def get_serpapi_api_key(self) -> str | None:
        """Get the SerpAPI key value if set."""
        return self.SERPAPI_API_KEY.get_secret_value() if self.SERPAPI_API_KEY else None

    def get_gemini_api_key(self) -> str | None:
        """Get the generation API key value if set."""
        return self.GEMINI_API_KEY.get_secret_value() if self.GEMINI_API_KEY else None

    def get_wp_app_password(self) -> str | None:
        """Get the WordPress application password if set."""
        return self.WP_APP_PASSWORD.get_secret_value() if self.WP_APP_PASSWORD else None


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Loads settings from environment variables and .env file on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If required environment variables are missing or invalid
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton. Useful for testing."""
    global _settings
    _settings = None
