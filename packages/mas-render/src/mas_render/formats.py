from .base import ReportRenderer
from .box import BoxRenderer
from .narrative import NarrativeRenderer
from .settings import RenderSettings

RENDERERS: dict[str, type[ReportRenderer]] = {
    BoxRenderer.format_name: BoxRenderer,
    NarrativeRenderer.format_name: NarrativeRenderer,
}


def get_renderer(name: str, settings: RenderSettings | None = None) -> ReportRenderer:
    """Look up a renderer by format name ("box" or "narrative")."""
    try:
        cls = RENDERERS[name]
    except KeyError:
        raise ValueError(f"Unknown format '{name}'. Choose from: {', '.join(sorted(RENDERERS))}") from None
    return cls(settings)
