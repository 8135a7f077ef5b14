"""
changelog_parser/patterns.py — wzorce regex nagłówków wersji.

Każdy HeaderPattern zawiera:
  - format        : rodzaj konwencji (HeaderFormat)
  - regex         : skompilowany wzorzec z re.MULTILINE (^ = początek linii);
                    wbudowane także z re.ASCII (klasy znaków tylko ASCII)
  - version_group : numer grupy z etykietą wersji; data (jeśli jest)
                    siedzi zawsze w grupie version_group + 1

Wbudowane konwencje:
  KEEP_A_CHANGELOG  ## [1.0.0] - 2024-01-15   /   ## [Unreleased]
  MARKDOWN_HEADER   ## 1.0.0   /   ### v1.0.0 (2024-03-01)
  UNDERLINE_HEADER  1.0.0 + linia z samych '=' lub '-'

Na jedno parsowanie aktywny jest dokładnie jeden wzorzec.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from .errors import ConfigurationError, UnknownFormatError


class HeaderFormat(StrEnum):
    KEEP_A_CHANGELOG = "keep_a_changelog"
    MARKDOWN         = "markdown"
    UNDERLINE        = "underline"
    CUSTOM           = "custom"


@dataclass(frozen=True, slots=True)
class HeaderPattern:
    format:        HeaderFormat
    regex:         re.Pattern[str]
    version_group: int = 1

    @property
    def date_group(self) -> int:
        return self.version_group + 1

    @property
    def has_date_group(self) -> bool:
        """True gdy wzorzec ma co najmniej dwie grupy i istnieje grupa daty."""
        return self.regex.groups >= 2 and self.date_group <= self.regex.groups

    def find_next(self, text: str, pos: int = 0) -> re.Match[str] | None:
        """Następne dopasowanie zaczynające się nie wcześniej niż pos."""
        return self.regex.search(text, pos)

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


def _p(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.MULTILINE | re.ASCII)


# Token wersji: co najmniej jeden wewnętrzny separator '.', koniec alfanumeryczny.
_VERSION_TOKEN = r"[\w.+-]+\.[\w.+-]+[a-zA-Z0-9]"

KEEP_A_CHANGELOG = HeaderPattern(
    format=HeaderFormat.KEEP_A_CHANGELOG,
    regex=_p(r"^##\s+\[([^\]]+)\](?:\s+-\s+(\d{4}-\d{2}-\d{2}))?"),
)

MARKDOWN_HEADER = HeaderPattern(
    format=HeaderFormat.MARKDOWN,
    regex=_p(rf"^#{{1,3}}\s+v?({_VERSION_TOKEN})(?:\s+\((\d{{4}}-\d{{2}}-\d{{2}})\))?"),
)

UNDERLINE_HEADER = HeaderPattern(
    format=HeaderFormat.UNDERLINE,
    regex=_p(rf"^({_VERSION_TOKEN})\n[=-]+"),
)

FORMATS: dict[HeaderFormat, HeaderPattern] = {
    HeaderFormat.KEEP_A_CHANGELOG: KEEP_A_CHANGELOG,
    HeaderFormat.MARKDOWN:         MARKDOWN_HEADER,
    HeaderFormat.UNDERLINE:        UNDERLINE_HEADER,
}


def format_names() -> list[str]:
    return [str(f) for f in FORMATS]


def get_format(name: HeaderFormat | str) -> HeaderPattern:
    """
    Zwraca wbudowany wzorzec po nazwie.

    Akceptuje HeaderFormat albo napis ("markdown", "Keep-A-Changelog", ...).
    Nieznana nazwa → UnknownFormatError.
    """
    key = str(name).strip().lower().replace("-", "_")
    try:
        return FORMATS[HeaderFormat(key)]
    except (ValueError, KeyError):
        raise UnknownFormatError(str(name), format_names()) from None


def custom_pattern(
    pattern: str | re.Pattern[str],
    version_group: int = 1,
) -> HeaderPattern:
    """
    Buduje HeaderPattern z wzorca użytkownika.

    Napis kompilujemy z re.MULTILINE; do gotowego re.Pattern dokładamy
    re.MULTILINE, żeby '^' zawsze oznaczało początek linii.
    """
    try:
        if isinstance(pattern, re.Pattern):
            regex = re.compile(pattern.pattern, pattern.flags | re.MULTILINE)
        else:
            regex = re.compile(pattern, re.MULTILINE)
    except re.error as e:
        raise ConfigurationError(f"Niepoprawny wzorzec wersji {pattern!r}: {e}") from e

    if version_group < 1 or version_group > regex.groups:
        raise ConfigurationError(
            f"Wzorzec {regex.pattern!r} ma {regex.groups} grup(y); "
            f"nie można użyć grupy {version_group} jako etykiety wersji."
        )
    return HeaderPattern(
        format=HeaderFormat.CUSTOM,
        regex=regex,
        version_group=version_group,
    )
