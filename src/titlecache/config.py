"""Configuration loading for titlecache."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="TITLECACHE_")

    # Network settings
    network_base_url: str = Field(
        default="http://localhost", description="Base URL of the title backend"
    )
    network_timeout: float = Field(
        default=30.0, gt=0, description="HTTP timeout in seconds"
    )
    skip_network: bool = Field(
        default=True, description="Serve fake titles instead of calling the backend"
    )
    fake_error_rate: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Failure rate of the fake backend"
    )

    # Storage settings
    database_path: str = Field(default=":memory:", description="SQLite database path")

    # Application settings
    snackbar_delay: float = Field(
        default=1.0, ge=0, description="Seconds before the greeting snackbar appears"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(
        default=True, description="Render logs as JSON lines instead of console text"
    )

    @field_validator("network_base_url")
    @classmethod
    def validate_network_base_url(cls, v: str) -> str:
        """Validate the backend URL is an http(s) URL."""
        v = v.strip()
        if not v:
            raise ValueError(
                "TITLECACHE_NETWORK_BASE_URL must not be empty. "
                "Set it to the title backend URL."
            )
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                f"TITLECACHE_NETWORK_BASE_URL '{v}' must start with http:// or https://."
            )
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is one the logging module knows."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"TITLECACHE_LOG_LEVEL '{v}' is not a valid log level.")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
