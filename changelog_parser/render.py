"""
changelog_parser/render.py — konwersja treści wersji do HTML.

Rdzeń nie wybiera renderera sam: wywołujący przekazuje funkcję
Renderer (str → str). markdown_it_renderer() to gotowa fabryka na bazie
markdown-it-py, używana przez CLI.
"""

from __future__ import annotations

from typing import Callable, TypeAlias

from .errors import RendererNotConfiguredError

Renderer: TypeAlias = Callable[[str], str]


def render_html(content: str | None, renderer: Renderer | None) -> str | None:
    """Pusta treść wraca bez zmian, bez sięgania po renderer."""
    if not content:
        return content
    if renderer is None:
        raise RendererNotConfiguredError()
    return renderer(content)


def markdown_it_renderer(preset: str = "commonmark") -> Renderer:
    from markdown_it import MarkdownIt

    md = MarkdownIt(preset)
    return md.render
