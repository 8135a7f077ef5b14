"""Komenda: clp parse — cały changelog jako JSON (wersja → data, treść)."""

from __future__ import annotations

import argparse
import json

from changelog_parser import ChangelogParserError, markdown_it_renderer

from clp._source import _fail, add_source_arguments, build_changelog_parser


def run(args: argparse.Namespace) -> None:
    parser = build_changelog_parser(args)

    try:
        entries = parser.to_html(markdown_it_renderer()) if args.html else parser.parse()
    except ChangelogParserError as e:
        _fail(f"[red]Błąd renderowania HTML:[/red] {e}")

    data = {label: entry.to_dict() for label, entry in entries.items()}
    print(json.dumps(data, ensure_ascii=False, indent=2 if args.pretty else None))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje changelog i wypisuje wszystkie wersje jako JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje changelog i wypisuje mapę wersja → {date, content} jako JSON,
w kolejności występowania wersji w dokumencie.

Przykłady:
  clp parse CHANGELOG.md --pretty
  clp parse - < CHANGELOG.md
  clp parse https://example.com/CHANGELOG.md --html
  clp parse NEWS.txt --pattern '^Version ([\\d.]+) released (\\d{4}-\\d{2}-\\d{2})'
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "--pretty",
        action="store_true",
        help="JSON z wcięciami (2 spacje).",
    )
    p.add_argument(
        "--html",
        action="store_true",
        help="Treść wersji jako HTML (markdown-it-py).",
    )
    p.set_defaults(func=run)
