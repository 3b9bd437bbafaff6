"""Tests for environment-driven settings."""

import pytest
from typestub_gateway.infrastructure.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("PORT", "REMOTE_HOST", "REJECT_ERROR_STATUS", "FETCH_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.port == 8080
        assert settings.remote_host == "https://github.com"
        assert settings.fetch_timeout_seconds is None
        assert settings.reject_error_status is False

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults; trailing slash is dropped."""
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("REMOTE_HOST", "https://git.example.com/")
        monkeypatch.setenv("REJECT_ERROR_STATUS", "true")

        settings = Settings(_env_file=None)

        assert settings.port == 9090
        assert settings.remote_host == "https://git.example.com"
        assert settings.reject_error_status is True
