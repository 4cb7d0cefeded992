"""Fixed-width box format for terminals and chat messages.

Layout, top to bottom: title, header info, phase, one region per section,
footer blocks, and the final GO/NO-GO line. Regions are divided by ``╠═╣``
rules; empty regions are left out. Every line is padded or truncated so the
right border sits in the same column.
"""

from mas_core.models.blocks import ContentBlock, KVPairsBlock, ListBlock, MetricBlock, TableBlock, TextBlock
from mas_core.models.report import Report, Section, TaskResult

from .base import BlockRenderer, ReportRenderer, normalize_table
from .text import one_line, pad_right, single_line, truncate, visual_width, wrap_text

TOP = ("╔", "═", "╗")
SEPARATOR = ("╠", "═", "╣")
BOTTOM = ("╚", "═", "╝")
SIDE = "║"

SECTION_INDENT = "  "
STATUS_COLUMN = 5


class BoxBlockRenderer(BlockRenderer):
    """Plain-text block lines; text blocks are wrapped to ``wrap_width``."""

    def __init__(self, wrap_width: int):
        self.wrap_width = wrap_width

    def render_text(self, block: TextBlock) -> list[str]:
        if not block.content:
            return []
        return wrap_text(block.content, self.wrap_width)

    def render_kv_pairs(self, block: KVPairsBlock) -> list[str]:
        lines = []
        for pair in block.pairs:
            text = f"{pair.key}: {pair.value}"
            lines.append(f"{pair.icon} {text}" if pair.icon else text)
        return lines

    def render_list(self, block: ListBlock) -> list[str]:
        lines = []
        for item in block.items:
            icon = item.effective_icon
            lines.append(f"{icon} {item.text}" if icon else f"  {item.text}")
        return lines

    def render_table(self, block: TableBlock) -> list[str]:
        if not block.headers and not block.rows:
            return []
        ncols, headers, rows = normalize_table(block.headers, block.rows)
        headers = [one_line(c) for c in headers]
        rows = [[one_line(c) for c in r] for r in rows]
        widths = [max(visual_width(r[i]) for r in [headers, *rows] if r) for i in range(ncols)]

        def line(cells: list[str]) -> str:
            return " │ ".join(pad_right(c, w) for c, w in zip(cells, widths)).rstrip()

        lines = []
        if headers:
            lines.append(line(headers))
            lines.append("─┼─".join("─" * w for w in widths))
        lines.extend(line(r) for r in rows)
        return lines

    def render_metric(self, block: MetricBlock) -> list[str]:
        text = f"{block.label}: {block.value}"
        if block.target:
            text += f" (target: {block.target})"
        if block.status is not None:
            text = f"{block.status.icon} {text}"
        return [text]


class BoxRenderer(ReportRenderer):
    format_name = "box"

    @property
    def width(self) -> int:
        return self.settings.box_width

    @property
    def text_width(self) -> int:
        # one column of left margin inside the border
        return self.width - 1

    # -------------------------------
    # Framing
    # -------------------------------

    def _rule(self, glyphs: tuple[str, str, str]) -> str:
        left, fill, right = glyphs
        return left + fill * self.width + right

    def _line(self, text: str) -> str:
        text = truncate(single_line(text), self.text_width)
        return f"{SIDE} {pad_right(text, self.text_width)}{SIDE}"

    def _centered(self, text: str) -> str:
        text = truncate(one_line(text), self.width)
        gap = self.width - visual_width(text)
        left = gap // 2
        return SIDE + " " * left + text + " " * (gap - left) + SIDE

    # -------------------------------
    # Regions
    # -------------------------------

    def _block_lines(self, blocks: list[ContentBlock], indent: str = "") -> list[str]:
        renderer = BoxBlockRenderer(self.text_width - len(indent))
        return [f"{indent}{line}" if line else "" for block in blocks for line in renderer.render(block)]

    def _info_lines(self, report: Report) -> list[str]:
        if report.summary_blocks:
            return self._block_lines(report.summary_blocks)

        lines = []
        if report.project:
            lines.append(f"Project: {report.project}")
        if report.version:
            lines.append(f"Version: {report.version}")
        elif report.target:
            lines.append(f"Target: {report.target}")
        lines.extend(f"{key}: {report.tags[key]}" for key in sorted(report.tags))
        return lines

    def _task_line(self, task: TaskResult) -> str:
        id_width = self.settings.task_id_width
        task_id = pad_right(truncate(task.id, id_width), id_width)
        status = task.status.value
        if task.severity:
            status += f" [{task.severity}]"
        prefix = f"{SECTION_INDENT}{task_id} {task.status.icon} {pad_right(status, STATUS_COLUMN)} "
        room = self.text_width - visual_width(prefix)
        detail = truncate(one_line(task.detail), room) if room > 0 else ""
        return (prefix + detail).rstrip()

    def _section_lines(self, section: Section) -> list[str]:
        header = f"{section.status.icon} {section.display_name}: {section.status.value}"
        if section.verdict:
            header += f" ({section.verdict})"

        lines = [header]
        lines.extend(self._task_line(t) for t in section.tasks)
        lines.extend(self._block_lines(section.content_blocks, SECTION_INDENT))
        return lines

    # -------------------------------
    # Layout
    # -------------------------------

    def _render(self, report: Report) -> str:
        regions: list[list[str]] = [
            [self._centered(self.title_for(report))],
            [self._line(s) for s in self._info_lines(report)],
            [self._line(report.phase)] if report.phase else [],
        ]
        regions.extend([self._line(s) for s in self._section_lines(section)] for section in report.sections)
        regions.append([self._line(s) for s in self._block_lines(report.footer_blocks)])
        regions.append([self._centered(report.final_message())])

        out = [self._rule(TOP)]
        first = True
        for region in regions:
            if not region:
                continue
            if not first:
                out.append(self._rule(SEPARATOR))
            out.extend(region)
            first = False
        out.append(self._rule(BOTTOM))
        return "\n".join(out) + "\n"


def render_box(report: Report, settings=None) -> str:
    """Render ``report`` in the box format."""
    return BoxRenderer(settings).render(report)
