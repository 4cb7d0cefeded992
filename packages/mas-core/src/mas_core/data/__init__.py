from .loader import (
    load_agent_result,
    load_agent_results,
    load_report,
    load_typed,
    parse_agent_result,
    parse_report,
    read_document_raw,
)

__all__ = [
    "load_agent_result",
    "load_agent_results",
    "load_report",
    "load_typed",
    "parse_agent_result",
    "parse_report",
    "read_document_raw",
]
