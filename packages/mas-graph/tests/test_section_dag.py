"""Tests for the section dependency graph."""

import graphviz
import pytest
from mas_core.models import Report, Section, Status, TaskResult
from mas_graph.render import render_section_dag


@pytest.fixture
def report():
    return Report(
        title="Release Gate",
        sections=[
            Section(id="release", depends_on=["qa", "legal"]),
            Section(id="qa", name="qa-team", depends_on=["pm"], tasks=[TaskResult(id="t", status=Status.WARN)]),
            Section(id="pm", tasks=[TaskResult(id="t", status=Status.GO)]),
        ],
    )


class TestRenderSectionDag:
    def test_returns_digraph(self, report):
        dot = render_section_dag(report)
        assert isinstance(dot, graphviz.Digraph)
        assert dot.name == "mas_section_dag"

    def test_nodes_carry_name_id_and_status(self, report):
        source = render_section_dag(report).source
        assert "qa-team\\n(qa)\\nWARN" in source
        assert "fillcolor=lightgoldenrod1" in source
        assert "fillcolor=palegreen" in source
        assert "fillcolor=lightgrey" in source

    def test_edges_point_from_dependency(self, report):
        source = render_section_dag(report).source
        assert "section_2 -> section_1" in source
        assert "section_1 -> section_0" in source

    def test_missing_dependency_placeholder(self, report):
        source = render_section_dag(report).source
        assert "legal\\n(missing)" in source
        assert "missing_0 -> section_0" in source
        assert "style=dashed" in source

    def test_cycle_does_not_fail(self):
        report = Report(sections=[Section(id="a", depends_on=["b"]), Section(id="b", depends_on=["a"])])
        source = render_section_dag(report).source
        assert "section_1 -> section_0" in source
        assert "section_0 -> section_1" in source

    def test_empty_report(self):
        assert "digraph mas_section_dag" in render_section_dag(Report()).source
