"""Unit tests for configuration."""

import pytest
from pydantic import ValidationError

from titlecache.config import Settings


class TestSettings:
    """Tests for Settings validation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults should describe an offline in-memory setup."""
        for name in (
            "NETWORK_BASE_URL",
            "SKIP_NETWORK",
            "DATABASE_PATH",
            "LOG_LEVEL",
            "LOG_JSON",
            "SNACKBAR_DELAY",
        ):
            monkeypatch.delenv(f"TITLECACHE_{name}", raising=False)

        settings = Settings()

        assert settings.network_base_url == "http://localhost"
        assert settings.skip_network is True
        assert settings.database_path == ":memory:"
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.snackbar_delay == 1.0

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should be read from TITLECACHE_ variables."""
        monkeypatch.setenv("TITLECACHE_NETWORK_BASE_URL", "https://titles.example.com/")
        monkeypatch.setenv("TITLECACHE_SKIP_NETWORK", "false")
        monkeypatch.setenv("TITLECACHE_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.network_base_url == "https://titles.example.com"
        assert settings.skip_network is False
        assert settings.log_level == "DEBUG"

    def test_rejects_non_http_url(self) -> None:
        """Base URL must be http(s)."""
        with pytest.raises(ValidationError, match="must start with http"):
            Settings(network_base_url="ftp://titles.example.com")

    def test_rejects_empty_url(self) -> None:
        """Base URL must not be blank."""
        with pytest.raises(ValidationError, match="must not be empty"):
            Settings(network_base_url="  ")

    def test_rejects_bad_error_rate(self) -> None:
        """Fake error rate must be a probability."""
        with pytest.raises(ValidationError):
            Settings(fake_error_rate=2.0)

    def test_rejects_unknown_log_level(self) -> None:
        """Log level must be a logging level name."""
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")
