"""Shared renderer plumbing.

Every output format supplies a ``BlockRenderer`` (one method per content
block kind) and a ``ReportRenderer`` that lays out a whole report. The report
renderer orders sections by their dependencies before handing them to the
format, and never touches the caller's report.
"""

import logging
from abc import ABC, abstractmethod
from typing import TextIO, assert_never

from mas_core.dag import order_sections
from mas_core.models.blocks import (
    ContentBlock,
    KVPairsBlock,
    ListBlock,
    MetricBlock,
    TableBlock,
    TextBlock,
)
from mas_core.models.report import Report

from .settings import RenderSettings

_logger = logging.getLogger("mas.render")


class RenderError(RuntimeError):
    """Raised when a report cannot be formatted."""


def normalize_table(headers: list[str], rows: list[list[str]]) -> tuple[int, list[str], list[list[str]]]:
    """Pad headers and rows with empty cells so every row has the same length."""
    ncols = max([len(headers), *(len(r) for r in rows)])

    def pad(cells: list[str]) -> list[str]:
        return list(cells) + [""] * (ncols - len(cells))

    return ncols, (pad(headers) if headers else []), [pad(r) for r in rows]


class BlockRenderer(ABC):
    """Turns one content block into output lines."""

    def render(self, block: ContentBlock) -> list[str]:
        return self.render_title(block.title) + self.render_body(block)

    def render_body(self, block: ContentBlock) -> list[str]:
        match block:
            case TextBlock():
                return self.render_text(block)
            case KVPairsBlock():
                return self.render_kv_pairs(block)
            case ListBlock():
                return self.render_list(block)
            case TableBlock():
                return self.render_table(block)
            case MetricBlock():
                return self.render_metric(block)
            case _:
                assert_never(block)

    def render_title(self, title: str) -> list[str]:
        return [title] if title else []

    @abstractmethod
    def render_text(self, block: TextBlock) -> list[str]: ...

    @abstractmethod
    def render_kv_pairs(self, block: KVPairsBlock) -> list[str]: ...

    @abstractmethod
    def render_list(self, block: ListBlock) -> list[str]: ...

    @abstractmethod
    def render_table(self, block: TableBlock) -> list[str]: ...

    @abstractmethod
    def render_metric(self, block: MetricBlock) -> list[str]: ...


class ReportRenderer(ABC):
    """Formats a whole report as text."""

    format_name: str = ""

    def __init__(self, settings: RenderSettings | None = None):
        self.settings = settings or RenderSettings()

    def title_for(self, report: Report) -> str:
        return report.title or self.settings.default_title

    def render(self, report: Report) -> str:
        ordered = report.model_copy(update={"sections": order_sections(report.sections)})
        _logger.debug("Rendering %s output for %d sections", self.format_name, len(ordered.sections))
        try:
            return self._render(ordered)
        except RenderError:
            raise
        except (ValueError, TypeError, KeyError, AttributeError, IndexError) as e:
            raise RenderError(f"Failed to render {self.format_name} output: {e}") from e

    def write(self, report: Report, stream: TextIO) -> None:
        stream.write(self.render(report))

    @abstractmethod
    def _render(self, report: Report) -> str: ...
