"""
clp — narzędzie CLI do wyciągania historii wersji z changelogów.

Użycie:
  clp <komenda> [opcje]

Komendy:
  parse     Parsuje changelog i wypisuje wszystkie wersje jako JSON.
  versions  Listuje etykiety wersji (jedna na linię).
  show      Pokazuje jedną wersję changeloga.
  between   Wypisuje linie changeloga między dwiema wersjami.
  find      Wyszukuje plik changeloga w katalogu.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from changelog_parser import __version__

from clp._config import load_settings
from clp.commands import between as cmd_between
from clp.commands import find as cmd_find
from clp.commands import parse as cmd_parse
from clp.commands import show as cmd_show
from clp.commands import versions as cmd_versions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clp",
        description="Changelog parser — wersje, daty i treść z plików CHANGELOG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"clp {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logi diagnostyczne (DEBUG) na stderr.",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_parse.add_parser(subparsers)
    cmd_versions.add_parser(subparsers)
    cmd_show.add_parser(subparsers)
    cmd_between.add_parser(subparsers)
    cmd_find.add_parser(subparsers)

    return parser


def _force_utf8() -> None:
    # Windows: terminal może używać cp1252; wymuszamy UTF-8 dla polskich znaków.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else load_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def main() -> None:
    _force_utf8()
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
