"""Combine per-agent results into one team report."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from mas_core.models.report import REPORT_SCHEMA_URL, AgentResult, Report

__all__ = ["aggregate_results"]

_logger = logging.getLogger("mas.aggregate")


def aggregate_results(
    results: Sequence[AgentResult],
    project: str,
    version: str,
    phase: str,
    *,
    title: str = "",
    generated_by: str = "release-coordinator",
    generated_at: datetime | None = None,
) -> Report:
    """Build a Report with one section per agent result.

    Section statuses are recomputed from each result's tasks and the report
    status from the sections. Sections keep the order of ``results``; the
    renderers order them by dependency.
    """
    sections = []
    for result in results:
        if result.error:
            _logger.warning("agent %r reported an execution error: %s", result.agent_id, result.error)
        sections.append(result.to_section())

    report = Report(
        schema_url=REPORT_SCHEMA_URL,
        title=title,
        project=project,
        version=version,
        target=version,
        phase=phase,
        sections=sections,
        generated_at=generated_at or datetime.now(timezone.utc),
        generated_by=generated_by,
    )
    _logger.debug("aggregated %d agent results into report status %s", len(sections), report.status.value)
    return report
