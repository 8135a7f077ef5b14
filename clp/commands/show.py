"""Komenda: clp show — pojedyncza wersja (JSON, surowa treść lub Markdown)."""

from __future__ import annotations

import argparse
import json

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from clp._source import _fail, add_source_arguments, build_changelog_parser

console = Console()


def run(args: argparse.Namespace) -> None:
    parser = build_changelog_parser(args)
    entry = parser[args.version]

    if entry is None:
        _fail(f"[red]Nie znaleziono wersji:[/red] {args.version}")

    if args.markdown:
        title = args.version + (f" ({entry.date.isoformat()})" if entry.date else "")
        console.print(Panel(Markdown(entry.content), title=title, expand=False))
    elif args.content:
        print(entry.content)
    else:
        print(json.dumps({args.version: entry.to_dict()}, ensure_ascii=False, indent=2 if args.pretty else None))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "show",
        help="Pokazuje jedną wersję changeloga.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wypisuje wpis jednej wersji: domyślnie JSON {wersja: {date, content}}.

Przykłady:
  clp show 1.0.0 CHANGELOG.md
  clp show 1.0.0 CHANGELOG.md --content
  clp show Unreleased --markdown
        """,
    )
    p.add_argument(
        "version",
        metavar="WERSJA",
        help="Etykieta wersji dokładnie jak w changelogu (np. 1.0.0, Unreleased).",
    )
    add_source_arguments(p)
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--content", "-c",
        action="store_true",
        help="Tylko surowa treść wersji (tekst).",
    )
    mode.add_argument(
        "--markdown", "-m",
        action="store_true",
        help="Wyrenderuj treść jako Markdown w terminalu.",
    )
    p.add_argument(
        "--pretty",
        action="store_true",
        help="JSON z wcięciami (2 spacje).",
    )
    p.set_defaults(func=run)
