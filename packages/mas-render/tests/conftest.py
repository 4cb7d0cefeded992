from datetime import datetime, timezone

import pytest
from mas_core.models import (
    KVPair,
    ListItem,
    NarrativeSection,
    Report,
    Section,
    Status,
    TaskResult,
    kv_pairs_block,
    list_block,
    metric_block,
    table_block,
    text_block,
)


@pytest.fixture
def release_report():
    """Three teams, one blocking finding, sections listed out of dependency order."""
    return Report(
        project="github.com/example/widget",
        version="v1.2.0",
        phase="PHASE 1: REVIEW",
        tags={"customer": "acme", "channel": "stable"},
        summary="One critical finding blocks the release.",
        conclusion="Fix the injection and re-run security.",
        generated_at=datetime(2026, 2, 12, 9, 30, tzinfo=timezone.utc),
        sections=[
            Section(
                id="security",
                name="security-review",
                verdict="BLOCKED",
                depends_on=["qa"],
                tasks=[
                    TaskResult(
                        id="sql-injection",
                        status=Status.NO_GO,
                        severity="critical",
                        detail="SQL injection in login",
                    ),
                    TaskResult(id="vuln-scan", status=Status.WARN, detail="2 findings"),
                ],
                narrative=NarrativeSection(
                    problem="User input reaches the query builder unescaped.",
                    recommendation="Use bound parameters.",
                ),
            ),
            Section(
                id="qa",
                name="qa",
                depends_on=["pm"],
                tasks=[TaskResult(id="unit-tests", status=Status.GO, detail="412 passed")],
                content_blocks=[metric_block("Coverage", "85%", Status.GO, "80%")],
            ),
            Section(id="pm", name="pm", tasks=[TaskResult(id="scope", status=Status.GO)]),
        ],
    )


@pytest.fixture
def block_report():
    """Report that uses summary and footer blocks instead of the legacy header."""
    return Report(
        title="Release Gate",
        version="v2.0.0",
        summary_blocks=[kv_pairs_block("", KVPair(key="Status", value="active", icon="✅"))],
        footer_blocks=[
            list_block("Next steps", ListItem(text="tag release", status=Status.GO), ListItem(text="announce")),
            table_block("", ["Name", "Value"], [["foo", "bar"]]),
        ],
        sections=[
            Section(
                id="docs",
                tasks=[TaskResult(id="links", status=Status.GO)],
                content_blocks=[text_block("Notes", "All pages build.")],
            )
        ],
    )
