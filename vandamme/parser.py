"""
vandamme/parser.py — adapter zgodności ze starszym API (tylko napisy).

Przyjmuje opcje pod dawnymi nazwami (changelog=, version_header_exp=)
i zwraca mapę etykieta → treść, bez dat. Kolejność kluczy i nadpisywanie
duplikatów są dokładnie takie jak w ChangelogParser.parse().
"""

from __future__ import annotations

import re

from changelog_parser.parser import ChangelogParser
from changelog_parser.patterns import HeaderFormat
from changelog_parser.render import Renderer


class Parser:
    __slots__ = ("parser",)

    def __init__(
        self,
        changelog: str | None = "",
        version_header_exp: str | re.Pattern[str] | None = None,
        format: HeaderFormat | str | None = None,
        match_group: int = 1,
        renderer: Renderer | None = None,
    ) -> None:
        self.parser = ChangelogParser(
            changelog,
            version_pattern=version_header_exp,
            format=format,
            match_group=match_group,
            renderer=renderer,
        )

    def parse(self) -> dict[str, str]:
        return {label: entry.content for label, entry in self.parser.parse().items()}

    def render_html(self, content: str | None, renderer: Renderer | None = None) -> str | None:
        return self.parser.render_html(content, renderer)

    def to_html(self, renderer: Renderer | None = None) -> dict[str, str]:
        return {
            label: self.render_html(content, renderer)
            for label, content in self.parse().items()
        }
