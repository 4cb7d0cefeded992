"""Tests for combining agent results into a report."""

import logging
from datetime import datetime, timezone

from mas_core.aggregation import aggregate_results
from mas_core.dag import order_sections
from mas_core.models import AgentResult, Status, TaskResult
from mas_core.models.report import REPORT_SCHEMA_URL


def result(agent_id: str, *statuses: Status, **kwargs) -> AgentResult:
    tasks = [TaskResult(id=f"{agent_id}-{i}", status=s) for i, s in enumerate(statuses)]
    return AgentResult(agent_id=agent_id, tasks=tasks, **kwargs)


class TestAggregateResults:
    def test_header_fields(self):
        when = datetime(2026, 2, 12, tzinfo=timezone.utc)
        report = aggregate_results([result("qa", Status.GO)], "widget", "v1.2.0", "PHASE 1: REVIEW", generated_at=when)
        assert report.schema_url == REPORT_SCHEMA_URL
        assert (report.project, report.version, report.target, report.phase) == (
            "widget",
            "v1.2.0",
            "v1.2.0",
            "PHASE 1: REVIEW",
        )
        assert report.generated_by == "release-coordinator"
        assert report.generated_at == when

    def test_statuses_rolled_up(self):
        results = [
            result("pm", Status.GO),
            result("qa", Status.GO, Status.WARN),
            result("security", Status.NO_GO, status=Status.GO),
        ]
        report = aggregate_results(results, "widget", "v1.2.0", "")
        assert [s.status for s in report.sections] == [Status.GO, Status.WARN, Status.NO_GO]
        assert report.status == Status.NO_GO
        assert not report.is_go()

    def test_keeps_input_order(self):
        results = [
            result("release", depends_on=["qa"]),
            result("qa", depends_on=["pm"]),
            result("pm"),
        ]
        report = aggregate_results(results, "widget", "v1", "")
        assert [s.id for s in report.sections] == ["release", "qa", "pm"]
        assert [s.id for s in order_sections(report.sections)] == ["pm", "qa", "release"]

    def test_all_skipped(self):
        report = aggregate_results([result("a", Status.SKIP), result("b")], "widget", "v1", "")
        assert report.status == Status.SKIP

    def test_generated_at_defaults_to_now(self):
        report = aggregate_results([], "widget", "v1", "")
        assert report.generated_at is not None
        assert report.generated_at.tzinfo is not None

    def test_agent_errors_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mas.aggregate"):
            aggregate_results([result("qa", error="timeout")], "widget", "v1", "")
        assert "timeout" in caplog.text
