"""Renderer factory."""

from __future__ import annotations

from ticketpack.contracts.renderer import PlanRenderer
from ticketpack.renderers.markdown import MarkdownRenderer

RENDERERS: dict[str, type[PlanRenderer]] = {"markdown": MarkdownRenderer}


def create_renderer(name: str, **kwargs: object) -> PlanRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ValueError(f"Unknown renderer: {name}")
    return renderer_cls(**kwargs)
