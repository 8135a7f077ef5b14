"""
changelog_parser — wyciąganie historii wersji z dokumentów changelog.

Publiczne API:
  ChangelogParser(text, format, version_pattern, match_group, renderer)
  parse(text, **options)               -> ChangelogMap
  parse_file(path, **options)          -> ChangelogMap
  find_changelog(directory)            -> Path | None
  find_and_parse(directory, **options) -> ChangelogMap | None
  RangeLocator(text).locate / .between zapytania zakresowe po liniach
  HeaderFormat, HeaderPattern          wzorce nagłówków
  markdown_it_renderer()               renderer HTML do wstrzyknięcia

Typowe użycie:
  from changelog_parser import ChangelogParser

  parser = ChangelogParser(text)              # autodetekcja formatu
  for version, entry in parser.parse().items():
      print(version, entry.date, len(entry.content))
"""

from .discovery import CHANGELOG_FILENAMES, find_changelog
from .errors import (
    ChangelogParserError,
    ConfigurationError,
    RendererNotConfiguredError,
    UnknownFormatError,
)
from .locator import RangeLocator, line_for_version
from .parser import ChangelogParser, find_and_parse, parse, parse_file
from .patterns import (
    FORMATS,
    KEEP_A_CHANGELOG,
    MARKDOWN_HEADER,
    UNDERLINE_HEADER,
    HeaderFormat,
    HeaderPattern,
    custom_pattern,
    get_format,
)
from .render import Renderer, markdown_it_renderer, render_html

__version__ = "0.1.0"

__all__ = [
    "CHANGELOG_FILENAMES",
    "find_changelog",
    "ChangelogParserError",
    "ConfigurationError",
    "RendererNotConfiguredError",
    "UnknownFormatError",
    "RangeLocator",
    "line_for_version",
    "ChangelogParser",
    "find_and_parse",
    "parse",
    "parse_file",
    "FORMATS",
    "KEEP_A_CHANGELOG",
    "MARKDOWN_HEADER",
    "UNDERLINE_HEADER",
    "HeaderFormat",
    "HeaderPattern",
    "custom_pattern",
    "get_format",
    "Renderer",
    "markdown_it_renderer",
    "render_html",
    "__version__",
]
