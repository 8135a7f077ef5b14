"""
changelog_parser/detector.py — wybór wzorca nagłówków dla dokumentu.

Kolejność rozstrzygania (raz, przy konstrukcji parsera):
  1. jawny wzorzec użytkownika (version_pattern)
  2. nazwany format wbudowany (format)
  3. autodetekcja: KEEP_A_CHANGELOG → UNDERLINE_HEADER → MARKDOWN_HEADER

Autodetekcja to pojedyncza próba istnienia dopasowania na kandydata,
w stałej kolejności; nic nie jest liczone ani punktowane.
"""

from __future__ import annotations

import dataclasses
import logging
import re

from .errors import ConfigurationError
from .patterns import (
    KEEP_A_CHANGELOG,
    MARKDOWN_HEADER,
    UNDERLINE_HEADER,
    HeaderFormat,
    HeaderPattern,
    custom_pattern,
    get_format,
)

logger = logging.getLogger(__name__)


def detect_format(text: str) -> HeaderPattern:
    if KEEP_A_CHANGELOG.matches(text):
        return KEEP_A_CHANGELOG
    if UNDERLINE_HEADER.matches(text):
        return UNDERLINE_HEADER
    # Fallback bez sprawdzania, czy cokolwiek pasuje.
    return MARKDOWN_HEADER


def resolve_pattern(
    text: str,
    format: HeaderFormat | str | None = None,
    version_pattern: str | re.Pattern[str] | None = None,
    match_group: int = 1,
) -> HeaderPattern:
    if version_pattern is not None:
        pattern = custom_pattern(version_pattern, match_group)
        logger.debug("Wzorzec użytkownika: %r (grupa %d)", pattern.regex.pattern, match_group)
        return pattern

    if format is not None:
        pattern = get_format(format)
        source = "jawny"
    else:
        pattern = detect_format(text)
        source = "autodetekcja"

    logger.debug("Format nagłówków: %s (%s)", pattern.format, source)
    return _with_group(pattern, match_group, detected=format is None)


def _with_group(pattern: HeaderPattern, match_group: int, detected: bool = False) -> HeaderPattern:
    """Przestawia grupę etykiety we wzorcu wbudowanym (domyślnie 1)."""
    if match_group == pattern.version_group:
        return pattern
    if match_group < 1 or match_group > pattern.regex.groups:
        hint = (
            " Format wybrała autodetekcja na podstawie treści; "
            "podaj format lub własny wzorzec jawnie."
            if detected else ""
        )
        raise ConfigurationError(
            f"Format '{pattern.format}' ma {pattern.regex.groups} grup(y); "
            f"nie można użyć grupy {match_group} jako etykiety wersji.{hint}"
        )
    return dataclasses.replace(pattern, version_group=match_group)
