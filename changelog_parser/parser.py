"""
changelog_parser/parser.py — fasada silnika: dokument → mapa wersji.

Architektura:
  tekst → resolve_pattern() (wzorzec / format / autodetekcja)
  → find_version_matches() → lista MatchRecord w kolejności dokumentu
  → build_entries() → ChangelogMap (etykieta → VersionEntry)

Zapytania zakresowe (line_for_version, between) idą osobną ścieżką przez
RangeLocator, bezpośrednio po liniach surowego tekstu.

Kluczowe funkcje publiczne:
  ChangelogParser(text, format=..., version_pattern=..., match_group=...)
  parse(text, **options)          -> ChangelogMap
  parse_file(path, **options)     -> ChangelogMap
  find_and_parse(directory, **options) -> ChangelogMap | None
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from data_model.changelog import ChangelogMap, VersionEntry

from .detector import resolve_pattern
from .discovery import find_changelog as _find_changelog
from .entries import build_entries
from .locator import RangeLocator
from .patterns import HeaderFormat, HeaderPattern
from .render import Renderer, render_html
from .scanner import find_version_matches


class ChangelogParser:
    """
    Parser jednego dokumentu. Tekst i wzorzec są ustalane w konstruktorze
    i nie zmieniają się później; każde parse() liczy wynik od nowa.
    """

    def __init__(
        self,
        changelog: str | None,
        format: HeaderFormat | str | None = None,
        version_pattern: str | re.Pattern[str] | None = None,
        match_group: int = 1,
        renderer: Renderer | None = None,
    ) -> None:
        self._changelog = "" if changelog is None else str(changelog)
        self._pattern = resolve_pattern(
            self._changelog,
            format=format,
            version_pattern=version_pattern,
            match_group=match_group,
        )
        self.renderer = renderer

    # ---------------------------------------------------------------------------
    # Właściwości
    # ---------------------------------------------------------------------------

    @property
    def changelog(self) -> str:
        return self._changelog

    @property
    def pattern(self) -> HeaderPattern:
        return self._pattern

    @property
    def version_pattern(self) -> re.Pattern[str]:
        return self._pattern.regex

    @property
    def match_group(self) -> int:
        return self._pattern.version_group

    # ---------------------------------------------------------------------------
    # Parsowanie
    # ---------------------------------------------------------------------------

    def parse(self) -> ChangelogMap:
        if not self._changelog:
            return {}
        matches = find_version_matches(self._changelog, self._pattern)
        return build_entries(self._changelog, matches)

    def versions(self) -> list[str]:
        return list(self.parse())

    def __getitem__(self, version: str) -> VersionEntry | None:
        return self.parse().get(version)

    def get(self, version: str, default: VersionEntry | None = None) -> VersionEntry | None:
        return self.parse().get(version, default)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {label: entry.to_dict() for label, entry in self.parse().items()}

    def to_json(self, **json_kwargs: Any) -> str:
        json_kwargs.setdefault("ensure_ascii", False)
        return json.dumps(self.to_dict(), **json_kwargs)

    # ---------------------------------------------------------------------------
    # HTML
    # ---------------------------------------------------------------------------

    def render_html(self, content: str | None, renderer: Renderer | None = None) -> str | None:
        return render_html(content, renderer or self.renderer)

    def to_html(self, renderer: Renderer | None = None) -> ChangelogMap:
        """Ta sama mapa co parse(), z treścią przepuszczoną przez renderer."""
        return {
            label: VersionEntry(
                date=entry.date,
                content=self.render_html(entry.content, renderer),
            )
            for label, entry in self.parse().items()
        }

    # ---------------------------------------------------------------------------
    # Zapytania zakresowe
    # ---------------------------------------------------------------------------

    def line_for_version(self, version: str | None) -> int | None:
        return RangeLocator(self._changelog).locate(version)

    def between(self, old_version: str | None, new_version: str | None) -> str | None:
        return RangeLocator(self._changelog).between(old_version, new_version)

    # ---------------------------------------------------------------------------
    # Konstruktory pomocnicze
    # ---------------------------------------------------------------------------

    @classmethod
    def parse_text(cls, changelog: str | None, **options: Any) -> ChangelogMap:
        return cls(changelog, **options).parse()

    @classmethod
    def from_file(cls, path: str | Path, **options: Any) -> ChangelogParser:
        content = Path(path).read_text(encoding="utf-8")
        return cls(content, **options)

    @classmethod
    def parse_file(cls, path: str | Path, **options: Any) -> ChangelogMap:
        return cls.from_file(path, **options).parse()

    @staticmethod
    def find_changelog(directory: str | Path = ".") -> Path | None:
        return _find_changelog(directory)

    @classmethod
    def find_and_parse(cls, directory: str | Path = ".", **options: Any) -> ChangelogMap | None:
        path = _find_changelog(directory)
        if path is None:
            return None
        return cls.parse_file(path, **options)


def parse(changelog: str | None, **options: Any) -> ChangelogMap:
    return ChangelogParser.parse_text(changelog, **options)


def parse_file(path: str | Path, **options: Any) -> ChangelogMap:
    return ChangelogParser.parse_file(path, **options)


def find_and_parse(directory: str | Path = ".", **options: Any) -> ChangelogMap | None:
    return ChangelogParser.find_and_parse(directory, **options)
