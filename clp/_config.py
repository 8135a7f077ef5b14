"""Konfiguracja CLI — zmienne środowiskowe (opcjonalnie z pliku .env)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from changelog_parser.patterns import format_names

_DEFAULT_TIMEOUT = 30.0
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    format:       str | None    # None = autodetekcja
    http_timeout: float         # sekundy dla pobierania URL
    log_level:    str


def load_settings() -> Settings:
    # .env z katalogu roboczego; zmienne już ustawione w środowisku wygrywają.
    load_dotenv(find_dotenv(usecwd=True), override=False)

    fmt = os.getenv("CLP_FORMAT") or None
    if fmt is not None and fmt not in format_names():
        fmt = None

    try:
        timeout = float(os.getenv("CLP_HTTP_TIMEOUT", str(_DEFAULT_TIMEOUT)))
    except ValueError:
        timeout = _DEFAULT_TIMEOUT
    if timeout <= 0:
        timeout = _DEFAULT_TIMEOUT

    level = os.getenv("CLP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = _DEFAULT_LOG_LEVEL

    return Settings(format=fmt, http_timeout=timeout, log_level=level)
