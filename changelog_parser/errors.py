"""
changelog_parser/errors.py — hierarchia wyjątków parsera.

Wyjątki zgłaszane są wyłącznie dla błędów konfiguracji. Brak wersji,
brak linii nagłówka i niepoprawna data to zwykłe None, nie wyjątki.
"""

from __future__ import annotations


class ChangelogParserError(Exception):
    """Bazowy wyjątek pakietu changelog_parser."""


class ConfigurationError(ChangelogParserError):
    """Niepoprawna konfiguracja parsera (format, wzorzec, renderer)."""


class UnknownFormatError(ConfigurationError, ValueError):
    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(
            f"Nieznany format nagłówków: '{name}'. Dostępne: {', '.join(known)}"
        )


class RendererNotConfiguredError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "Brak renderera Markdown. Przekaż renderer=... "
            "(np. markdown_it_renderer())."
        )
