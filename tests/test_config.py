"""
Tests for CLI settings loaded from the environment and .env files.
"""

import pytest

from clp._config import load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.format is None
        assert settings.http_timeout == 30.0
        assert settings.log_level == "WARNING"

    def test_environment_values(self, monkeypatch):
        monkeypatch.setenv("CLP_FORMAT", "underline")
        monkeypatch.setenv("CLP_HTTP_TIMEOUT", "2.5")
        monkeypatch.setenv("CLP_LOG_LEVEL", "debug")

        settings = load_settings()
        assert settings.format == "underline"
        assert settings.http_timeout == 2.5
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("CLP_FORMAT", "asciidoc"),
            ("CLP_HTTP_TIMEOUT", "soon"),
            ("CLP_HTTP_TIMEOUT", "-1"),
            ("CLP_LOG_LEVEL", "LOUD"),
        ],
    )
    def test_invalid_values_fall_back_to_defaults(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        settings = load_settings()
        assert settings.format is None
        assert settings.http_timeout == 30.0
        assert settings.log_level == "WARNING"

    def test_dotenv_file_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text("CLP_FORMAT=markdown\nCLP_HTTP_TIMEOUT=7\n", encoding="utf-8")
        settings = load_settings()
        assert settings.format == "markdown"
        assert settings.http_timeout == 7.0

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("CLP_LOG_LEVEL=DEBUG\n", encoding="utf-8")
        monkeypatch.setenv("CLP_LOG_LEVEL", "ERROR")
        assert load_settings().log_level == "ERROR"
