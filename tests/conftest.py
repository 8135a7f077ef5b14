"""Pytest configuration for changelog-parser tests."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


def fixture_path(name: str) -> Path:
    return FIXTURES / name


def read_fixture(name: str) -> str:
    return fixture_path(name).read_text(encoding="utf-8")


@pytest.fixture
def keep_a_changelog_text() -> str:
    return read_fixture("keep_a_changelog.md")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """No stray CLP_* settings leak into (or out of) tests."""
    for name in ("CLP_FORMAT", "CLP_HTTP_TIMEOUT", "CLP_LOG_LEVEL"):
        # setenv first so the variable is restored even if .env loading sets it
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
