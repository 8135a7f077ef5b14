"""
changelog_parser/scanner.py — skanowanie dokumentu w poszukiwaniu nagłówków.

Jedno przejście od lewej do prawej: każde kolejne dopasowanie szukane jest
od końca poprzedniego, więc trafienia nigdy na siebie nie nachodzą.
Wynik to lista MatchRecord w kolejności dokumentu.
"""

from __future__ import annotations

import logging
import re
from datetime import date

from data_model.changelog import MatchRecord

from .patterns import HeaderPattern

logger = logging.getLogger(__name__)


def find_version_matches(text: str, pattern: HeaderPattern) -> list[MatchRecord]:
    matches: list[MatchRecord] = []
    pos = 0
    length = len(text)

    while pos <= length:
        m = pattern.find_next(text, pos)
        if m is None:
            break

        # Puste dopasowanie (tylko wzorce użytkownika): przesuń o znak.
        pos = m.end() if m.end() > m.start() else m.end() + 1

        version = m.group(pattern.version_group)
        if version is None:
            logger.debug("Pominięto dopasowanie bez etykiety na pozycji %d", m.start())
            continue

        matches.append(MatchRecord(
            version=version,
            date=extract_date(m, pattern),
            start_pos=m.start(),
            end_pos=m.end(),
        ))

    logger.debug("Znaleziono %d nagłówków wersji", len(matches))
    return matches


def extract_date(m: re.Match[str], pattern: HeaderPattern) -> date | None:
    """
    Data z grupy następującej po grupie etykiety.

    Brak grupy, brak dopasowania grupy lub niepoprawna data → None.
    """
    if not pattern.has_date_group:
        return None

    raw = m.group(pattern.date_group)
    if not raw:
        return None

    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        logger.debug("Niepoprawna data %r przy wersji %r", raw, m.group(pattern.version_group))
        return None
