"""Output formats for mas team reports."""

from .base import BlockRenderer, RenderError, ReportRenderer
from .box import BoxBlockRenderer, BoxRenderer, render_box
from .formats import RENDERERS, get_renderer
from .narrative import MarkdownBlockRenderer, NarrativeRenderer, render_narrative
from .settings import RenderSettings, load_render_settings

__all__ = [
    "BlockRenderer",
    "BoxBlockRenderer",
    "BoxRenderer",
    "MarkdownBlockRenderer",
    "NarrativeRenderer",
    "RENDERERS",
    "RenderError",
    "RenderSettings",
    "ReportRenderer",
    "get_renderer",
    "load_render_settings",
    "render_box",
    "render_narrative",
]
