"""Komenda: clp between — fragment changeloga między dwiema wersjami."""

from __future__ import annotations

import argparse

from clp._source import _fail, add_source_arguments, build_changelog_parser


def run(args: argparse.Namespace) -> None:
    parser = build_changelog_parser(args)
    text = parser.between(args.old_version, args.new_version)

    if text is None:
        _fail(
            f"[red]Nie znaleziono linii żadnej z wersji:[/red] "
            f"{args.old_version}, {args.new_version}"
        )
    print(text)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "between",
        help="Wypisuje linie changeloga między dwiema wersjami.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Szuka heurystycznie linii nagłówków obu wersji (po liniach surowego tekstu)
i wypisuje zakres linii:

  STARA przed NOWĄ  → od linii STAREJ do końca dokumentu
  STARA za NOWĄ     → od linii NOWEJ do linii przed STARĄ
  tylko STARA       → od początku dokumentu do linii przed STARĄ
  tylko NOWA        → od linii NOWEJ do końca dokumentu

Przykłady:
  clp between 1.0.0 1.2.0 CHANGELOG.md
  clp between v2.3.1 v2.4.0
        """,
    )
    p.add_argument("old_version", metavar="STARA", help="Wersja starsza.")
    p.add_argument("new_version", metavar="NOWA", help="Wersja nowsza.")
    add_source_arguments(p)
    p.set_defaults(func=run)
