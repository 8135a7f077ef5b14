"""Komenda: clp find — wyszukuje plik changeloga w katalogu."""

from __future__ import annotations

import argparse

from changelog_parser import find_changelog

from clp._source import _fail


def run(args: argparse.Namespace) -> None:
    try:
        path = find_changelog(args.directory)
    except FileNotFoundError as e:
        _fail(f"[red]{e}[/red]")

    if path is None:
        _fail(f"[yellow]Brak pliku changeloga w:[/yellow] {args.directory}")
    print(path)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "find",
        help="Wyszukuje plik changeloga w katalogu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Sprawdza nazwy w kolejności: changelog, news, changes, history, release,
whatsnew, releases (z rozszerzeniem .md/.txt/.rst/.rdoc/.markdown lub bez).

Przykłady:
  clp find
  clp find ../projekt
        """,
    )
    p.add_argument(
        "directory",
        nargs="?",
        default=".",
        metavar="KATALOG",
        help="Katalog do przeszukania (domyślnie: bieżący).",
    )
    p.set_defaults(func=run)
