from .blocks import (
    ContentBlock,
    KVPair,
    KVPairsBlock,
    ListBlock,
    ListItem,
    MetricBlock,
    TableBlock,
    TextBlock,
    kv_pairs_block,
    list_block,
    metric_block,
    table_block,
    text_block,
)
from .findings import Finding, ValidationReport
from .report import AgentResult, NarrativeSection, Report, Section, TaskResult
from .status import Status, aggregate

__all__ = [
    "AgentResult",
    "ContentBlock",
    "Finding",
    "KVPair",
    "KVPairsBlock",
    "ListBlock",
    "ListItem",
    "MetricBlock",
    "NarrativeSection",
    "Report",
    "Section",
    "Status",
    "TableBlock",
    "TaskResult",
    "TextBlock",
    "ValidationReport",
    "aggregate",
    "kv_pairs_block",
    "list_block",
    "metric_block",
    "table_block",
    "text_block",
]
