"""
changelog_parser/discovery.py — wyszukiwanie pliku changeloga w katalogu.

Nazwy bazowe sprawdzane w kolejności priorytetu (CHANGELOG_FILENAMES),
z opcjonalnym rozszerzeniem .md/.txt/.rst/.rdoc/.markdown, bez względu
na wielkość liter. Jeden kandydat → zwracany od razu; kilku → pierwszy
o rozsądnym rozmiarze (_MIN_SIZE..._MAX_SIZE bajtów).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

CHANGELOG_FILENAMES: tuple[str, ...] = (
    "changelog",
    "news",
    "changes",
    "history",
    "release",
    "whatsnew",
    "releases",
)

_EXTENSIONS = r"(\.(md|txt|rst|rdoc|markdown))?"
_MIN_SIZE = 100
_MAX_SIZE = 1_000_000


def find_changelog(directory: str | Path = ".") -> Path | None:
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"Katalog nie istnieje: {root}")

    files = sorted(p.name for p in root.iterdir() if p.is_file())

    for name in CHANGELOG_FILENAMES:
        pattern = re.compile(rf"{name}{_EXTENSIONS}", re.IGNORECASE)
        candidates = [
            f for f in files
            if pattern.fullmatch(f) and not f.endswith(".sh")
        ]

        if len(candidates) == 1:
            logger.debug("Changelog: %s", candidates[0])
            return root / candidates[0]

        for candidate in candidates:
            path = root / candidate
            size = path.stat().st_size
            if size > _MAX_SIZE or size < _MIN_SIZE:
                logger.debug("Pominięto %s (rozmiar %d B)", candidate, size)
                continue
            return path

    return None
