"""
vandamme — starsze API parsera changelogów (etykieta → treść).

  from vandamme import Parser
  Parser(changelog=text, version_header_exp=r"^Version ([\\d.]+)").parse()
"""

from .parser import Parser

__all__ = ["Parser"]
