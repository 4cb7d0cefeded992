import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mas_core.codebase.deprecation import emit_deprecation

from .blocks import ContentBlock, _blank_to_none
from .status import Status, aggregate

DEFAULT_TITLE = "TEAM STATUS REPORT"
REPORT_SCHEMA_URL = "https://raw.githubusercontent.com/plexusone/multi-agent-spec/main/schema/report/team-report.schema.json"

_logger = logging.getLogger("mas.models")


def _zero_time_to_none(v):
    # Producers without "omitempty" on timestamps emit the zero time.
    if isinstance(v, str) and v.startswith("0001-01-01"):
        return None
    if isinstance(v, datetime) and v.year == 1:
        return None
    return v


def _promote_legacy_checks(data: Any, owner: str) -> Any:
    """Accept the pre-0.2 ``checks`` key as an alias of ``tasks``."""
    if isinstance(data, dict) and "checks" in data and "tasks" not in data:
        emit_deprecation(
            f"{owner}.checks",
            "The 'checks' key is read as 'tasks'.",
            since="0.2.0",
            alternative="'tasks'",
            remove_in="0.4.0",
            stacklevel=2,
        )
        data = dict(data)
        data["tasks"] = data.pop("checks")
    return data


class TaskResult(BaseModel):
    """Outcome of one discrete check performed by an agent."""

    model_config = ConfigDict(extra="ignore")
    id: str
    status: Status
    severity: str = ""
    detail: str = ""
    duration: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("duration", mode="before")
    @classmethod
    def _coerce_duration(cls, v):
        return "" if v is None else str(v)


class NarrativeSection(BaseModel):
    """Prose for the narrative format."""

    model_config = ConfigDict(extra="ignore")
    problem: str = ""
    analysis: str = ""
    recommendation: str = ""

    def is_empty(self) -> bool:
        return not (self.problem or self.analysis or self.recommendation)


class Section(BaseModel):
    """One agent/team contribution to a report.

    ``id`` is the key other sections reference in ``depends_on``. When no
    status is given it is rolled up from the tasks.
    """

    model_config = ConfigDict(extra="ignore")
    id: str
    name: str = ""
    agent_id: str = ""
    model: str = ""
    status: Status | None = None
    verdict: str = ""
    tasks: list[TaskResult] = Field(default_factory=list)
    content_blocks: list[ContentBlock] = Field(default_factory=list)
    depends_on: list[str] = Field(default_factory=list)
    narrative: NarrativeSection | None = None

    @model_validator(mode="before")
    @classmethod
    def _legacy_checks(cls, data: Any) -> Any:
        return _promote_legacy_checks(data, "Section")

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status(cls, v):
        return _blank_to_none(v)

    @field_validator("depends_on", mode="before")
    @classmethod
    def _null_deps(cls, v):
        return [] if v is None else v

    @model_validator(mode="after")
    def _default_status(self) -> "Section":
        if self.status is None:
            self.status = self.computed_status()
        return self

    @property
    def display_name(self) -> str:
        return self.name or self.id

    def computed_status(self) -> Status:
        return aggregate(t.status for t in self.tasks)

    def has_narrative(self) -> bool:
        return self.narrative is not None and not self.narrative.is_empty()


class Report(BaseModel):
    """Complete team report: header fields, ordered sections, and prose."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    schema_url: str | None = Field(default=None, alias="$schema")
    title: str = ""
    project: str = ""
    version: str = ""
    target: str = ""
    phase: str = ""
    tags: dict[str, str] = Field(default_factory=dict)
    summary_blocks: list[ContentBlock] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list, alias="teams")
    footer_blocks: list[ContentBlock] = Field(default_factory=list)
    summary: str = ""
    conclusion: str = ""
    status: Status | None = None
    generated_at: datetime | None = None
    generated_by: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status(cls, v):
        return _blank_to_none(v)

    @field_validator("generated_at", mode="before")
    @classmethod
    def _zero_time(cls, v):
        return _zero_time_to_none(_blank_to_none(v))

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, v):
        if v is None:
            return {}
        if isinstance(v, dict):
            return {str(k): "" if val is None else str(val) for k, val in v.items()}
        return v

    @model_validator(mode="after")
    def _default_status(self) -> "Report":
        if self.status is None:
            self.status = self.compute_overall_status()
        return self

    @property
    def effective_title(self) -> str:
        return self.title or DEFAULT_TITLE

    def compute_overall_status(self) -> Status:
        status = aggregate(s.status for s in self.sections)
        if self.sections and all(s.status == Status.SKIP for s in self.sections):
            _logger.info("all %d sections are SKIP; report status rolls up to SKIP, not GO", len(self.sections))
        return status

    def is_go(self) -> bool:
        if self.status == Status.NO_GO:
            return False
        return all(s.status != Status.NO_GO for s in self.sections)

    def final_message(self) -> str:
        verdict = "GO" if self.is_go() else "NO-GO"
        icon = "\U0001F680" if self.is_go() else "\U0001F6D1"  # 🚀 / 🛑
        text = f"TEAM: {verdict} for {self.version}" if self.version else f"TEAM: {verdict}"
        return f"{icon} {text} {icon}"

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class AgentResult(BaseModel):
    """JSON output of one validation agent, consumed by aggregation."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    schema_url: str | None = Field(default=None, alias="$schema")
    agent_id: str
    step_id: str = ""
    inputs: dict[str, Any] = Field(default_factory=dict)
    outputs: dict[str, Any] = Field(default_factory=dict)
    tasks: list[TaskResult] = Field(default_factory=list)
    content_blocks: list[ContentBlock] = Field(default_factory=list)
    narrative: NarrativeSection | None = None
    depends_on: list[str] = Field(default_factory=list)
    status: Status | None = None
    executed_at: datetime | None = None
    agent_model: str = ""
    duration: str = ""
    error: str = ""

    @model_validator(mode="before")
    @classmethod
    def _legacy_checks(cls, data: Any) -> Any:
        return _promote_legacy_checks(data, "AgentResult")

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status(cls, v):
        return _blank_to_none(v)

    @field_validator("executed_at", mode="before")
    @classmethod
    def _zero_time(cls, v):
        return _zero_time_to_none(_blank_to_none(v))

    def compute_status(self) -> Status:
        return aggregate(t.status for t in self.tasks)

    def to_section(self) -> Section:
        return Section(
            id=self.step_id or self.agent_id,
            name=self.agent_id,
            agent_id=self.agent_id,
            model=self.agent_model,
            status=self.compute_status(),
            tasks=self.tasks,
            content_blocks=self.content_blocks,
            depends_on=self.depends_on,
            narrative=self.narrative,
        )
