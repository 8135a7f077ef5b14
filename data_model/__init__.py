"""
data_model — struktury danych wyniku parsowania changeloga.

Użycie:
  from data_model import MatchRecord, VersionEntry, ChangelogMap

Moduły:
  changelog — MatchRecord, VersionEntry, ChangelogMap

Cykl życia: wszystkie obiekty powstają w jednym wywołaniu parse()
i nie są współdzielone między wywołaniami.
"""

from .changelog import (
    ChangelogMap,
    MatchRecord,
    VersionEntry,
)

__all__ = [
    "ChangelogMap",
    "MatchRecord",
    "VersionEntry",
]
