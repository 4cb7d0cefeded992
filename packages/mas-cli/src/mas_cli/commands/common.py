import json
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

from mas_core.data.loader import read_document_raw
from rich.console import Console
from rich.markup import escape

SEVERITY_COLORS = {"FAIL": "red", "WARN": "yellow", "INFO": "blue"}


def read_raw(file: Optional[str]) -> Any:
    """Read a report document from ``file``, or from stdin when it is None or "-"."""
    if file and file != "-":
        return read_document_raw(Path(file))

    text = sys.stdin.read()
    if not text.strip():
        raise ValueError("Empty input on stdin")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON on stdin: {e}") from e


def print_finding(console: Console, finding) -> None:
    color = SEVERITY_COLORS.get(finding.severity, "white")
    console.print(f"[{color}]{finding.severity}[/{color}] {finding.code}: {escape(finding.message)}")


def fail(console: Console, message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)
