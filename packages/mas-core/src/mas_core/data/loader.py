import json
from pathlib import Path
from typing import Any, TypeVar, overload

import yaml
from pydantic import TypeAdapter, ValidationError

from mas_core.models.report import AgentResult, Report

T = TypeVar("T")

_YAML_SUFFIXES = {".yaml", ".yml"}


# -------------------------------
# Parsing of in-memory documents
# -------------------------------


def parse_report(data: str | bytes) -> Report:
    """Parse a JSON report document.

    json.JSONDecodeError and pydantic.ValidationError propagate unchanged.
    """
    return Report.model_validate(json.loads(data))


def parse_agent_result(data: str | bytes) -> AgentResult:
    return AgentResult.model_validate(json.loads(data))


# -------------------------------
# Internal raw reader (single source of truth)
# -------------------------------


def read_document_raw(path: Path | str) -> Any:
    """Read a JSON (or, by suffix, YAML) file into plain Python data."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"Unable to decode UTF-8 in {p}: {e}") from e

    if not text.strip():
        raise ValueError(f"Empty document: {p}")

    if p.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {p}: {e}") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {p}: {e}") from e


# -------------------------------
# Public typed loader
# -------------------------------


@overload
def load_typed(path: Path | str, *, adapter: TypeAdapter[T]) -> T: ...


@overload
def load_typed(path: Path | str, *, model: type[T]) -> T: ...


def load_typed(
    path: Path | str,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
) -> T:
    """Read a document and validate it into a typed object using Pydantic v2.

    Exactly one of {adapter, model} must be supplied.

    Example:
        load_typed("reports/release.json", model=Report)
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = read_document_raw(path)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except ValidationError as e:
        # Normalize error so callers see the file path in the message
        raise ValueError(f"Invalid structure in {path}: {e}") from e


def load_report(path: Path | str) -> Report:
    return load_typed(path, model=Report)


def load_agent_result(path: Path | str) -> AgentResult:
    return load_typed(path, model=AgentResult)


def load_agent_results(paths: list[Path | str]) -> list[AgentResult]:
    """Load several agent result files, preserving the given order."""
    return [load_agent_result(p) for p in paths]
