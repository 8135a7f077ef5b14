"""
changelog_parser/entries.py — budowanie mapy wersja → wpis z listy dopasowań.

Treść wersji i to tekst od końca nagłówka i do początku nagłówka i+1
(dla ostatniego — do końca dokumentu), przycięty z białych znaków.
Wnętrze treści (listy, kod, linki) zostaje bajt w bajt.
"""

from __future__ import annotations

from data_model.changelog import ChangelogMap, MatchRecord, VersionEntry


def build_entries(text: str, matches: list[MatchRecord]) -> ChangelogMap:
    """
    Duplikat etykiety nadpisuje wartość, ale pozycja w kolejności kluczy
    zostaje z pierwszego wystąpienia (zachowanie zwykłego dict).
    """
    versions: ChangelogMap = {}

    for index, match in enumerate(matches):
        start = match.end_pos
        end = matches[index + 1].start_pos if index + 1 < len(matches) else len(text)
        versions[match.version] = VersionEntry(
            date=match.date,
            content=text[start:end].strip(),
        )

    return versions
