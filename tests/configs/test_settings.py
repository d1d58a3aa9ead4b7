"""
Test suite for server settings.

System role: Verification of environment-driven server configuration
"""

import pytest
from pydantic import ValidationError

from diagram_planner.configs.base import BaseSettings


class TestServerSettings:
    """Test suite for the settings root."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("CORS_ORIGINS", raising=False)

        settings = BaseSettings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.cors_origin_list == ["*"]

    def test_log_level_is_normalised(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", " debug ")

        assert BaseSettings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError, match="Unknown log level"):
            BaseSettings(_env_file=None)

    def test_cors_origins_are_split(self, monkeypatch) -> None:
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com,")

        settings = BaseSettings(_env_file=None)

        assert settings.cors_origin_list == ["https://a.example.com", "https://b.example.com"]
