"""
data_model/changelog.py — rekordy dopasowań nagłówków i wpisy wersji changeloga.

MatchRecord odpowiada jednemu trafieniu nagłówka wersji w dokumencie;
VersionEntry to data + treść sekcji danej wersji. ChangelogMap zachowuje
kolejność pierwszego wystąpienia etykiety (kolejność dokumentu, nie semver).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, TypeAlias


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """Jedno trafienie nagłówka wersji (offsety znakowe w dokumencie)."""
    version:   str
    date:      date | None
    start_pos: int      # początek dopasowania nagłówka
    end_pos:   int      # koniec dopasowania; tu zaczyna się treść sekcji


@dataclass(slots=True)
class VersionEntry:
    date:    date | None
    content: str         # treść sekcji bez nagłówka, przycięta z obu stron

    def to_dict(self) -> dict[str, Any]:
        """Słownik gotowy do json.dumps (data w formacie ISO albo None)."""
        return {
            "date": self.date.isoformat() if self.date else None,
            "content": self.content,
        }


# Etykieta wersji → wpis, w kolejności pierwszego wystąpienia w dokumencie.
ChangelogMap: TypeAlias = dict[str, VersionEntry]
