"""Markdown narrative format, meant to be converted to PDF or published as-is.

Statuses appear as words (PASS, WARNING, FAIL, SKIP) rather than emoji, and
any status or final-message glyph that slips in through user content is
removed from the finished document, because PDF toolchains rarely ship a
font that can draw them.
"""

from mas_core.models.blocks import ContentBlock, KVPairsBlock, ListBlock, MetricBlock, TableBlock, TextBlock
from mas_core.models.report import Report, Section
from mas_core.models.status import STATUS_ICONS

from .base import BlockRenderer, ReportRenderer, normalize_table
from .text import one_line

STRIPPED_GLYPHS = STATUS_ICONS | {"\U0001F680", "\U0001F6D1"}  # 🚀 🛑

TASK_HEADERS = ["Task", "Status", "Severity", "Detail"]


def strip_glyphs(text: str) -> str:
    for glyph in STRIPPED_GLYPHS:
        text = text.replace(glyph, "")
    return text


def escape_cell(text: str) -> str:
    return one_line(text).replace("|", "\\|")


def table_lines(headers: list[str], rows: list[list[str]]) -> list[str]:
    ncols, headers, rows = normalize_table(headers, rows)
    if ncols == 0:
        return []

    def line(cells: list[str]) -> str:
        return "| " + " | ".join(escape_cell(c) for c in cells) + " |"

    # headerless tables still get an (empty) header row and separator
    lines = [line(headers) if headers else "|" + "  |" * ncols]
    lines.append("| " + " | ".join(["---"] * ncols) + " |")
    lines.extend(line(r) for r in rows)
    return lines


class MarkdownBlockRenderer(BlockRenderer):
    def render_title(self, title: str) -> list[str]:
        return [f"**{title}**", ""] if title else []

    def render_text(self, block: TextBlock) -> list[str]:
        return block.content.split("\n") if block.content else []

    def render_kv_pairs(self, block: KVPairsBlock) -> list[str]:
        return [f"- **{p.key}**: {p.value}" for p in block.pairs]

    def render_list(self, block: ListBlock) -> list[str]:
        lines = []
        for item in block.items:
            line = f"- {item.text}"
            if item.status is not None:
                line += f" [{item.status.text}]"
            lines.append(line)
        return lines

    def render_table(self, block: TableBlock) -> list[str]:
        return table_lines(block.headers, block.rows)

    def render_metric(self, block: MetricBlock) -> list[str]:
        line = f"- **{block.label}**: {block.value}"
        if block.target:
            line += f" (target: {block.target})"
        if block.status is not None:
            line += f" [{block.status.text}]"
        return [line]


class NarrativeRenderer(ReportRenderer):
    format_name = "narrative"

    def __init__(self, settings=None):
        super().__init__(settings)
        self.blocks = MarkdownBlockRenderer()

    def _blocks(self, blocks: list[ContentBlock]) -> str:
        return "\n\n".join("\n".join(self.blocks.render(b)) for b in blocks)

    def _front_matter(self, report: Report, title: str) -> str:
        quoted = one_line(title).replace("\\", "\\\\").replace('"', '\\"')
        lines = ["---", f'title: "{quoted}"']
        if report.generated_at is not None:
            lines.append(f'date: "{report.generated_at.strftime("%Y-%m-%d")}"')
        lines.append("---")
        return "\n".join(lines)

    def _meta(self, report: Report) -> str:
        lines = []
        if report.project:
            lines.append(f"**Project**: {report.project}")
        if report.version:
            lines.append(f"**Version**: {report.version}")
        elif report.target:
            lines.append(f"**Target**: {report.target}")
        if report.phase:
            lines.append(f"**Phase**: {report.phase}")
        lines.append(f"**Overall Status**: {report.status.text}")
        if report.tags:
            lines.append("**Tags**: " + ", ".join(f"{k}: {report.tags[k]}" for k in sorted(report.tags)))
        # Markdown needs two trailing spaces for a hard line break
        return "  \n".join(lines)

    def _section(self, section: Section) -> list[str]:
        parts = [f"### {one_line(section.display_name)}"]
        meta = [f"**Status**: {section.status.text}"]
        if section.verdict:
            meta.append(f"**Verdict**: {one_line(section.verdict)}")
        parts.append("  \n".join(meta))

        if section.has_narrative():
            for heading, text in (
                ("Problem", section.narrative.problem),
                ("Analysis", section.narrative.analysis),
                ("Recommendation", section.narrative.recommendation),
            ):
                if text:
                    parts.extend([f"#### {heading}", text])

        if section.tasks:
            rows = [[t.id, t.status.text, t.severity, t.detail] for t in section.tasks]
            parts.extend(["#### Tasks", "\n".join(table_lines(TASK_HEADERS, rows))])

        if section.content_blocks:
            parts.extend(["#### Details", self._blocks(section.content_blocks)])
        return parts

    def _render(self, report: Report) -> str:
        title = self.title_for(report)
        parts = [self._front_matter(report, title), f"# {one_line(title)}", self._meta(report)]

        if report.summary:
            parts.extend(["## Executive Summary", report.summary])
        if report.summary_blocks:
            parts.extend(["## Overview", self._blocks(report.summary_blocks)])

        parts.append("## Team Results")
        for section in report.sections:
            parts.extend(self._section(section))

        if report.footer_blocks:
            parts.extend(["## Action Items", self._blocks(report.footer_blocks)])
        if report.conclusion:
            parts.extend(["## Conclusion", report.conclusion])

        doc = "\n\n".join(p for p in parts if p)
        return strip_glyphs(doc) + "\n"


def render_narrative(report: Report, settings=None) -> str:
    """Render ``report`` as a Markdown document."""
    return NarrativeRenderer(settings).render(report)
