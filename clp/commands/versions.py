"""Komenda: clp versions — lista etykiet wersji w kolejności dokumentu."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from data_model.changelog import ChangelogMap

from clp._source import add_source_arguments, build_changelog_parser

console = Console()


def _show_table(entries: ChangelogMap) -> None:
    if not entries:
        console.print("[yellow]Brak wersji.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",       justify="right", no_wrap=True, style="dim")
    table.add_column("WERSJA",  no_wrap=True, style="bold cyan")
    table.add_column("DATA",    justify="center", no_wrap=True)
    table.add_column("LEN",     justify="right", no_wrap=True)

    for n, (label, entry) in enumerate(entries.items(), start=1):
        date_txt = entry.date.isoformat() if entry.date else Text("—", style="dim")
        table.add_row(str(n), label, date_txt, str(len(entry.content)))

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(entries)} wersji[/dim]\n")


def run(args: argparse.Namespace) -> None:
    parser = build_changelog_parser(args)
    entries = parser.parse()

    if args.table:
        _show_table(entries)
        return

    for label in entries:
        print(label)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "versions",
        help="Listuje etykiety wersji (jedna na linię).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje etykiety wersji w kolejności występowania w dokumencie
(bez sortowania semver).

Przykłady:
  clp versions CHANGELOG.md
  clp versions --table
  clp versions HISTORY.rst --format underline
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "--table",
        action="store_true",
        help="Wyświetl tabelę z datą i długością treści.",
    )
    p.set_defaults(func=run)
