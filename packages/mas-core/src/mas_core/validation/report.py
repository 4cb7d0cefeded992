"""
Report validation for mas.

Two layers run before rendering:

1. Structural validation is delegated to pydantic: the raw document is
   validated in strict mode against the report models.
2. Consistency checks look at the parsed report for things the model
   tolerates but a reader should know about: duplicate ids, dependencies on
   missing sections, cycles, declared statuses that disagree with the rollup,
   and content blocks carrying another kind's fields.

Findings never change what gets rendered.
"""

from __future__ import annotations

import json
from collections import Counter
from typing import Any, Callable

from pydantic import ValidationError

from mas_core.dag import unresolved_sections
from mas_core.models.blocks import BLOCK_TYPES
from mas_core.models.findings import Finding, ValidationReport
from mas_core.models.report import Report
from mas_core.models.status import Status

__all__ = [
    "validate_document",
    "check_block_fields",
    "check_duplicate_ids",
    "check_dependencies",
    "check_section_status",
    "check_report_status",
    "check_report",
    "run_report_validation",
]


def _loc(parts: tuple) -> str:
    return ".".join(str(p) for p in parts) or "<root>"


def validate_document(raw: Any) -> tuple[Report | None, list[Finding]]:
    """Strictly validate a raw document. Returns the report when it is valid."""
    if not isinstance(raw, dict):
        return None, [
            Finding(
                severity="FAIL",
                code="SCHEMA_INVALID",
                message=f"Report document must be an object, got {type(raw).__name__}",
            )
        ]

    try:
        # JSON mode so strict validation still accepts ISO timestamps and enum values.
        report = Report.model_validate_json(json.dumps(raw, default=str), strict=True)
    except ValidationError as e:
        findings = [
            Finding(
                severity="FAIL",
                code="SCHEMA_INVALID",
                message=f"{_loc(err['loc'])}: {err['msg']}",
                context={"loc": list(err["loc"]), "type": err["type"]},
            )
            for err in e.errors()
        ]
        return None, findings
    return report, []


def _iter_raw_blocks(raw: dict) -> list[tuple[str, Any]]:
    blocks: list[tuple[str, Any]] = []
    for key in ("summary_blocks", "footer_blocks"):
        for i, block in enumerate(raw.get(key) or []):
            blocks.append((f"{key}.{i}", block))
    for t, team in enumerate(raw.get("teams") or []):
        if not isinstance(team, dict):
            continue
        for i, block in enumerate(team.get("content_blocks") or []):
            blocks.append((f"teams.{t}.content_blocks.{i}", block))
    return blocks


def check_block_fields(raw: dict) -> list[Finding]:
    """Flag blocks that populate fields owned by a different block kind."""
    findings: list[Finding] = []
    all_fields = {name for model in BLOCK_TYPES.values() for name in model.model_fields}

    for where, block in _iter_raw_blocks(raw):
        if not isinstance(block, dict):
            continue
        kind = block.get("type")
        model = BLOCK_TYPES.get(kind) if isinstance(kind, str) else None
        if model is None:
            continue
        foreign = sorted(
            k for k, v in block.items() if k in all_fields and k not in model.model_fields and v not in (None, "", [], {})
        )
        if foreign:
            findings.append(
                Finding(
                    severity="WARN",
                    code="BLOCK_INACTIVE_FIELDS",
                    message=f"{where}: {block['type']} block carries {', '.join(foreign)}; they are ignored",
                    context={"where": where, "type": block["type"], "fields": foreign},
                )
            )
    return findings


def check_duplicate_ids(report: Report) -> list[Finding]:
    findings: list[Finding] = []

    for sid, count in Counter(s.id for s in report.sections).items():
        if count > 1:
            findings.append(
                Finding(
                    severity="WARN",
                    code="SECTION_DUPLICATE_ID",
                    message=f"Section id '{sid}' is used {count} times",
                    context={"section": sid, "count": count},
                )
            )

    for section in report.sections:
        for tid, count in Counter(t.id for t in section.tasks).items():
            if count > 1:
                findings.append(
                    Finding(
                        severity="WARN",
                        code="TASK_DUPLICATE_ID",
                        message=f"Task id '{tid}' appears {count} times in section '{section.id}'",
                        context={"section": section.id, "task": tid, "count": count},
                    )
                )
    return findings


def check_dependencies(report: Report) -> list[Finding]:
    findings: list[Finding] = []
    known = {s.id for s in report.sections}

    for section in report.sections:
        for dep in section.depends_on:
            if dep not in known:
                findings.append(
                    Finding(
                        severity="INFO",
                        code="DEPENDENCY_UNKNOWN",
                        message=f"Section '{section.id}' depends on unknown section '{dep}'; edge ignored",
                        context={"section": section.id, "depends_on": dep},
                    )
                )

    unresolved = unresolved_sections(report.sections)
    if unresolved:
        findings.append(
            Finding(
                severity="WARN",
                code="DEPENDENCY_CYCLE",
                message=f"Sections in or behind a dependency cycle keep their original order: {', '.join(unresolved)}",
                context={"sections": unresolved},
            )
        )
    return findings


def check_section_status(report: Report) -> list[Finding]:
    findings: list[Finding] = []
    for section in report.sections:
        if not section.tasks:
            continue
        rolled = section.computed_status()
        if section.status != rolled:
            findings.append(
                Finding(
                    severity="WARN",
                    code="SECTION_STATUS_MISMATCH",
                    message=f"Section '{section.id}' declares {section.status.value} but its tasks roll up to {rolled.value}",
                    context={"section": section.id, "declared": section.status.value, "computed": rolled.value},
                )
            )
    return findings


def check_report_status(report: Report) -> list[Finding]:
    findings: list[Finding] = []
    if not report.sections:
        return findings

    rolled = report.compute_overall_status()
    all_skip = rolled == Status.SKIP

    if all_skip and report.status == Status.GO:
        findings.append(
            Finding(
                severity="INFO",
                code="REPORT_ALL_SKIP_ROLLUP",
                message="Every section is SKIP but the report declares GO; kept as declared",
                context={"declared": report.status.value, "computed": rolled.value},
            )
        )
    elif report.status != rolled:
        findings.append(
            Finding(
                severity="WARN",
                code="REPORT_STATUS_MISMATCH",
                message=f"Report declares {report.status.value} but its sections roll up to {rolled.value}",
                context={"declared": report.status.value, "computed": rolled.value},
            )
        )
    return findings


_CHECKS: list[Callable[[Report], list[Finding]]] = [
    check_duplicate_ids,
    check_dependencies,
    check_section_status,
    check_report_status,
]


def _tally(groups: list[list[Finding]]) -> tuple[list[Finding], int]:
    findings: list[Finding] = []
    passed = 0
    for group in groups:
        if not any(f.severity in ("FAIL", "WARN") for f in group):
            passed += 1
        findings.extend(group)
    return findings, passed


def check_report(report: Report) -> ValidationReport:
    """Run the consistency checks on an already parsed report."""
    findings, passed = _tally([check(report) for check in _CHECKS])
    return ValidationReport.from_findings(findings, passed=passed)


def run_report_validation(raw: Any) -> tuple[Report | None, ValidationReport]:
    """Validate a raw document end to end.

    Returns the parsed report (None when structural validation failed) and
    the combined findings.
    """
    report, schema_findings = validate_document(raw)
    groups = [schema_findings]
    if isinstance(raw, dict):
        groups.append(check_block_fields(raw))
    if report is not None:
        groups.extend(check(report) for check in _CHECKS)

    findings, passed = _tally(groups)
    return report, ValidationReport.from_findings(findings, passed=passed)
