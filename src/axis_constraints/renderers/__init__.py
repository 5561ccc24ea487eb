"""Renderers for solved constraint groups."""

from __future__ import annotations

from axis_constraints.renderers.base import Renderer
from axis_constraints.renderers.jsondoc import JsonRenderer
from axis_constraints.renderers.text import TextRenderer

_RENDERERS = {
    "text": TextRenderer,
    "json": JsonRenderer,
}

FORMATS: tuple[str, ...] = tuple(_RENDERERS)


def get_renderer(fmt: str) -> Renderer:
    """Look up a renderer by format name."""
    renderer_cls = _RENDERERS.get(fmt.lower())
    if renderer_cls is None:
        raise ValueError(f"Unsupported output format: {fmt}")
    return renderer_cls()


__all__ = [
    "FORMATS",
    "JsonRenderer",
    "Renderer",
    "TextRenderer",
    "get_renderer",
]
