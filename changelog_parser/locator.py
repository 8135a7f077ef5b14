"""
changelog_parser/locator.py — heurystyczne wyszukiwanie linii nagłówka wersji.

Działa bezpośrednio na liście linii surowego dokumentu, niezależnie od
skanera nagłówków. Linia kandydująca musi:
  1. zawierać etykietę jako pełny token (nie wewnątrz 1.0.0.1 / 1.0.0-beta),
  2. nie zawierać etykiety jako lewej strony zakresu "X..Y",
  3. spełniać co najmniej jeden predykat z HEADER_LINE_PREDICATES.

Wygrywa pierwsza taka linia w kolejności dokumentu.

Kluczowe funkcje publiczne:
  line_for_version(lines, label)         -> int | None
  between_lines(lines, old_line, new_line) -> str | None
  RangeLocator(text).locate / .between
"""

from __future__ import annotations

import re
from typing import Callable, TypeAlias

# (linia, następna linia lub None, etykieta po re.escape) -> bool
LinePredicate: TypeAlias = Callable[[str, str | None, str], bool]

_LEADING_V_RE  = re.compile(r"^v", re.IGNORECASE | re.ASCII)
_ISO_DATE_RE   = re.compile(r"^\d{4}-\d{2}-\d{2}", re.ASCII)
_UNDERLINE_RE  = re.compile(r"^[=\-+]{3,}\s*$", re.ASCII)
_HEADER_PREFIXES = ("#", "!", "==")


def normalize_label(label: str | None) -> str | None:
    """Usuwa wiodące 'v'/'V'; pusta etykieta → None."""
    if label is None:
        return None
    label = str(label)
    if not label.strip():
        return None
    label = _LEADING_V_RE.sub("", label, count=1)
    return label or None


# ---------------------------------------------------------------------------
# Filtry tokenu
# ---------------------------------------------------------------------------

def contains_version_token(line: str, escaped: str) -> bool:
    return re.search(rf"(?<!\.){escaped}(?![.\-\w])", line, re.ASCII) is not None


def starts_version_range(line: str, escaped: str) -> bool:
    return re.search(rf"{escaped}\.\.", line, re.ASCII) is not None


# ---------------------------------------------------------------------------
# Predykaty linii nagłówka
# ---------------------------------------------------------------------------

def has_header_prefix(line: str, next_line: str | None, escaped: str) -> bool:
    return line.startswith(_HEADER_PREFIXES)


def is_label_line(line: str, next_line: str | None, escaped: str) -> bool:
    """'1.0.0 ...', 'v1.0.0: ...' — etykieta na początku, potem biały znak."""
    return re.match(rf"v?{escaped}:?\s", line, re.ASCII) is not None


def is_bracketed_label(line: str, next_line: str | None, escaped: str) -> bool:
    return re.match(rf"\[{escaped}\]", line, re.ASCII) is not None


def is_list_item_label(line: str, next_line: str | None, escaped: str) -> bool:
    """'- 1.0.0', '* Version 1.0.0', '+ version 1.0.0'."""
    return re.match(rf"[+*\-]\s+(version\s+)?{escaped}", line, re.IGNORECASE | re.ASCII) is not None


def is_date_line(line: str, next_line: str | None, escaped: str) -> bool:
    return _ISO_DATE_RE.match(line) is not None


def is_underlined(line: str, next_line: str | None, escaped: str) -> bool:
    return next_line is not None and _UNDERLINE_RE.match(next_line) is not None


HEADER_LINE_PREDICATES: tuple[LinePredicate, ...] = (
    has_header_prefix,
    is_label_line,
    is_bracketed_label,
    is_list_item_label,
    is_date_line,
    is_underlined,
)


def is_header_line(line: str, next_line: str | None, escaped: str) -> bool:
    if not contains_version_token(line, escaped):
        return False
    if starts_version_range(line, escaped):
        return False
    return any(pred(line, next_line, escaped) for pred in HEADER_LINE_PREDICATES)


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def line_for_version(lines: list[str], label: str | None) -> int | None:
    """Indeks (0-based) linii nagłówka wersji albo None."""
    version = normalize_label(label)
    if version is None:
        return None

    escaped = re.escape(version)
    for index, line in enumerate(lines):
        next_line = lines[index + 1] if index + 1 < len(lines) else None
        if is_header_line(line, next_line, escaped):
            return index
    return None


def between_lines(
    lines: list[str],
    old_line: int | None,
    new_line: int | None,
) -> str | None:
    """
    Zakres linii "pomiędzy" dwiema wersjami.

    old < new      → od old do końca dokumentu (NIE kończy się na new)
    old >= new     → od new do old - 1
    tylko old      → od 0 do old - 1 (None gdy old == 0)
    tylko new      → od new do końca dokumentu
    żadna          → None
    """
    if old_line is not None and new_line is not None:
        if old_line < new_line:
            selected = lines[old_line:]
        else:
            selected = lines[new_line:old_line]
    elif old_line is not None:
        if old_line == 0:
            return None
        selected = lines[:old_line]
    elif new_line is not None:
        selected = lines[new_line:]
    else:
        return None

    return "\n".join(selected).rstrip()


class RangeLocator:
    """Zapytania o linie wersji na niezmiennej liście linii dokumentu."""

    __slots__ = ("lines",)

    def __init__(self, text: str | None) -> None:
        self.lines: list[str] = (text or "").split("\n")

    def locate(self, label: str | None) -> int | None:
        return line_for_version(self.lines, label)

    def between(self, old_label: str | None, new_label: str | None) -> str | None:
        return between_lines(
            self.lines,
            self.locate(old_label),
            self.locate(new_label),
        )
