"""
Wspólne wejście komend: skąd wziąć tekst changeloga i jak zbudować parser.

Źródło (argument pozycyjny):
  PLIK          ścieżka do pliku
  -             standardowe wejście
  http(s)://…   pobranie przez requests
  (brak)        find_changelog() w bieżącym katalogu
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

import requests
from rich.console import Console

from changelog_parser import ChangelogParser, ChangelogParserError, find_changelog
from changelog_parser.patterns import format_names

from clp._config import load_settings

err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(message, highlight=False)
    raise SystemExit(1)


def _fetch_url(url: str, timeout: float) -> str:
    resp = requests.get(url, timeout=timeout, headers={"Accept": "text/plain, text/markdown, */*"})
    resp.raise_for_status()
    resp.encoding = resp.encoding or resp.apparent_encoding or "utf-8"
    return resp.text


def read_source(source: str | None) -> str:
    """Zwraca tekst changeloga albo kończy proces z kodem 1."""
    settings = load_settings()

    if source == "-":
        return sys.stdin.read()

    if source and source.startswith(("http://", "https://")):
        try:
            return _fetch_url(source, settings.http_timeout)
        except requests.RequestException as e:
            _fail(f"[red]Błąd pobierania:[/red] {e}")

    if source is None:
        try:
            found = find_changelog(Path.cwd())
        except FileNotFoundError as e:
            _fail(f"[red]{e}[/red]")
        if found is None:
            _fail("[red]Nie znaleziono pliku changeloga w bieżącym katalogu.[/red]")
        path = found
    else:
        path = Path(source)

    if not path.is_file():
        _fail(f"[red]Plik nie istnieje:[/red] {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"[red]Błąd odczytu pliku:[/red] {e}")


def build_changelog_parser(args: argparse.Namespace) -> ChangelogParser:
    text = read_source(args.source)
    fmt = args.format or load_settings().format
    try:
        return ChangelogParser(
            text,
            format=None if args.pattern else fmt,
            version_pattern=args.pattern,
            match_group=args.match_group,
        )
    except ChangelogParserError as e:
        _fail(f"[red]Błąd konfiguracji:[/red] {e}")


def add_source_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "source",
        nargs="?",
        metavar="ŹRÓDŁO",
        default=None,
        help="Plik changeloga, '-' (stdin) lub URL http(s). "
             "Domyślnie: wykryty plik w bieżącym katalogu.",
    )
    p.add_argument(
        "--format", "-f",
        choices=format_names(),
        default=None,
        help="Konwencja nagłówków (domyślnie: CLP_FORMAT lub autodetekcja).",
    )
    p.add_argument(
        "--pattern", "-p",
        metavar="REGEX",
        default=None,
        help="Własny wzorzec nagłówka wersji (ma pierwszeństwo przed --format).",
    )
    p.add_argument(
        "--match-group", "-g",
        type=int,
        default=1,
        metavar="N",
        help="Numer grupy z etykietą wersji (domyślnie: 1); data w grupie N+1.",
    )
