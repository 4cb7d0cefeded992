"""Tests for the Markdown narrative format."""

import pytest
from mas_core.models import KVPair, ListItem, Report, Section, Status, TaskResult
from mas_core.models.blocks import kv_pairs_block, list_block, metric_block, table_block, text_block
from mas_core.models.status import STATUS_ICONS
from mas_render import MarkdownBlockRenderer, render_narrative
from mas_render.narrative import STRIPPED_GLYPHS, escape_cell, strip_glyphs


class TestNarrativeDocument:
    def test_front_matter(self, release_report):
        doc = render_narrative(release_report)
        assert doc.startswith('---\ntitle: "TEAM STATUS REPORT"\ndate: "2026-02-12"\n---\n\n# TEAM STATUS REPORT\n\n')

    def test_header_fields(self, release_report):
        doc = render_narrative(release_report)
        assert "**Project**: github.com/example/widget" in doc
        assert "**Version**: v1.2.0" in doc
        assert "**Phase**: PHASE 1: REVIEW" in doc
        assert "**Overall Status**: FAIL" in doc
        assert "**Tags**: channel: stable, customer: acme" in doc

    def test_task_table(self, release_report):
        doc = render_narrative(release_report)
        assert "#### Tasks\n\n| Task | Status | Severity | Detail |\n| --- | --- | --- | --- |\n" in doc
        assert "| sql-injection | FAIL | critical | SQL injection in login |" in doc
        assert "| vuln-scan | WARNING |  | 2 findings |" in doc

    def test_section_order_and_prose(self, release_report):
        doc = render_narrative(release_report)
        assert doc.index("### pm") < doc.index("### qa") < doc.index("### security-review")
        assert "**Status**: FAIL  \n**Verdict**: BLOCKED" in doc
        assert "#### Problem\n\nUser input reaches the query builder unescaped." in doc
        assert "#### Recommendation\n\nUse bound parameters." in doc
        assert "#### Analysis" not in doc

    def test_optional_headings(self, release_report):
        doc = render_narrative(release_report)
        assert "## Executive Summary\n\nOne critical finding blocks the release." in doc
        assert "## Team Results" in doc
        assert doc.endswith("## Conclusion\n\nFix the injection and re-run security.\n")
        assert "## Overview" not in doc
        assert "## Action Items" not in doc

    def test_section_blocks_under_details(self, release_report):
        doc = render_narrative(release_report)
        assert "#### Details\n\n- **Coverage**: 85% (target: 80%) [PASS]" in doc

    def test_no_status_glyphs(self, release_report):
        doc = render_narrative(release_report)
        for glyph in STRIPPED_GLYPHS:
            assert glyph not in doc

    def test_glyphs_in_user_text_removed(self):
        report = Report(
            title="🚀 Launch",
            summary="All 🟢 except one 🔴",
            sections=[Section(id="qa", tasks=[TaskResult(id="t", status=Status.GO, detail="🟡 flaky")])],
        )
        doc = render_narrative(report)
        assert not any(glyph in doc for glyph in STATUS_ICONS | {"🚀", "🛑"})
        assert "flaky" in doc

    def test_blocks_sections(self, block_report):
        doc = render_narrative(block_report)
        assert "## Overview\n\n- **Status**: active" in doc
        assert "✅" not in doc
        assert "## Action Items\n\n**Next steps**\n\n- tag release [PASS]\n- announce" in doc
        assert "| Name | Value |\n| --- | --- |\n| foo | bar |" in doc
        assert "#### Details\n\n**Notes**\n\nAll pages build." in doc

    def test_title_and_no_date(self, block_report):
        doc = render_narrative(block_report)
        assert doc.startswith('---\ntitle: "Release Gate"\n---\n\n# Release Gate\n')

    def test_title_quotes_escaped(self):
        doc = render_narrative(Report(title='Say "hi"'))
        assert 'title: "Say \\"hi\\""' in doc

    def test_pipes_escaped(self):
        report = Report(sections=[Section(id="qa", tasks=[TaskResult(id="a|b", status=Status.WARN, detail="x | y")])])
        assert "| a\\|b | WARNING |  | x \\| y |" in render_narrative(report)

    def test_multiline_heading_and_verdict(self):
        report = Report(title="Release\nGate", sections=[Section(id="qa", name="qa\nteam", verdict="blocked\npending fix")])
        doc = render_narrative(report)
        assert "# Release Gate\n" in doc
        assert "### qa team\n" in doc
        assert "**Verdict**: blocked pending fix" in doc

    def test_empty_report(self):
        doc = render_narrative(Report())
        assert "**Overall Status**: SKIP" in doc
        assert "## Team Results" in doc


class TestMarkdownBlockRenderer:
    @pytest.fixture
    def renderer(self):
        return MarkdownBlockRenderer()

    def test_kv_pairs(self, renderer):
        block = kv_pairs_block("", KVPair(key="Status", value="active", icon="✅"))
        assert renderer.render(block) == ["- **Status**: active"]

    def test_list(self, renderer):
        block = list_block("", ListItem(text="done", icon="⭐"), ListItem(text="failing", status=Status.NO_GO))
        assert renderer.render(block) == ["- done", "- failing [FAIL]"]

    def test_table_short_rows(self, renderer):
        block = table_block("", ["a", "b", "c"], [["1"], ["1", "2", "3"]])
        assert renderer.render(block) == ["| a | b | c |", "| --- | --- | --- |", "| 1 |  |  |", "| 1 | 2 | 3 |"]

    def test_table_without_headers(self, renderer):
        assert renderer.render(table_block("", [], [["a", "b"]])) == ["|  |  |", "| --- | --- |", "| a | b |"]

    def test_metric(self, renderer):
        assert renderer.render(metric_block("Coverage", "85%", Status.GO, "80%")) == [
            "- **Coverage**: 85% (target: 80%) [PASS]"
        ]
        assert renderer.render(metric_block("Latency", "120ms")) == ["- **Latency**: 120ms"]

    def test_title(self, renderer):
        assert renderer.render(text_block("Notes", "line one\nline two")) == ["**Notes**", "", "line one", "line two"]


class TestHelpers:
    def test_strip_glyphs(self):
        assert strip_glyphs("🟢 ok 🛑") == " ok "

    def test_escape_cell(self):
        assert escape_cell("a|b\nc") == "a\\|b c"
