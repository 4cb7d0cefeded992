"""
Dependency ordering of report sections.

Sections name the ids of the sections they depend on in ``depends_on``. The
orderer puts every section after its dependencies using Kahn's algorithm;
whenever several sections are ready the smallest id goes first, so the result
does not depend on input order.

Dependencies on ids that are not in the report are ignored. Sections caught
in a cycle (or downstream of one) never become ready; they are appended after
everything else in their original relative order.
"""

from __future__ import annotations

import heapq
import logging
from typing import Sequence

from mas_core.codebase.deprecation import deprecated
from mas_core.models.report import Report, Section

__all__ = ["order_sections", "unresolved_sections", "sort_by_dag"]

_logger = logging.getLogger("mas.dag")


def _build_graph(sections: Sequence[Section]) -> tuple[list[int], list[list[int]]]:
    """Return (in_degree, dependents) indexed by position in ``sections``."""
    positions: dict[str, list[int]] = {}
    for idx, section in enumerate(sections):
        positions.setdefault(section.id, []).append(idx)

    in_degree = [0] * len(sections)
    dependents: list[list[int]] = [[] for _ in sections]

    for idx, section in enumerate(sections):
        for dep_id in dict.fromkeys(section.depends_on):
            targets = positions.get(dep_id)
            if targets is None:
                _logger.debug("section %r depends on unknown id %r; edge ignored", section.id, dep_id)
                continue
            for dep_idx in targets:
                dependents[dep_idx].append(idx)
                in_degree[idx] += 1

    return in_degree, dependents


def _kahn(sections: Sequence[Section]) -> tuple[list[int], list[int]]:
    in_degree, dependents = _build_graph(sections)

    ready = [(s.id, idx) for idx, s in enumerate(sections) if in_degree[idx] == 0]
    heapq.heapify(ready)

    ordered: list[int] = []
    while ready:
        _, idx = heapq.heappop(ready)
        ordered.append(idx)
        for dependent in dependents[idx]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                heapq.heappush(ready, (sections[dependent].id, dependent))

    done = set(ordered)
    leftover = [idx for idx in range(len(sections)) if idx not in done]
    return ordered, leftover


def order_sections(sections: Sequence[Section]) -> list[Section]:
    """Return ``sections`` in dependency order as a new list.

    The input sequence is not modified. Never raises on unknown dependencies
    or cycles.
    """
    ordered, leftover = _kahn(sections)
    if leftover:
        _logger.warning(
            "dependency cycle among sections %s; keeping their original order",
            ", ".join(repr(sections[i].id) for i in leftover),
        )
    return [sections[i] for i in ordered + leftover]


def unresolved_sections(sections: Sequence[Section]) -> list[str]:
    """Ids of sections that sit in, or depend on, a dependency cycle."""
    _, leftover = _kahn(sections)
    return [sections[i].id for i in leftover]


@deprecated(
    message="Reorders report.sections in place.",
    since="0.2.0",
    alternative="mas_core.dag.order_sections",
    remove_in="0.4.0",
)
def sort_by_dag(report: Report) -> None:
    report.sections = order_sections(report.sections)
