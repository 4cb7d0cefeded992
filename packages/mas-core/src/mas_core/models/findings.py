from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["FAIL", "WARN", "INFO"]


class Finding(BaseModel):
    """A single validation finding with severity, code, message, and context."""

    model_config = ConfigDict(extra="ignore")
    severity: Severity
    code: str
    message: str
    context: dict = Field(default_factory=dict)


class ValidationReport(BaseModel):
    """Findings about one report document plus per-severity counts."""

    model_config = ConfigDict(extra="ignore")
    summary: dict
    findings: list[Finding]

    @classmethod
    def from_findings(cls, findings: list[Finding], passed: int = 0) -> "ValidationReport":
        counts = {"pass": passed, "info": 0, "warn": 0, "fail": 0}
        for f in findings:
            counts[f.severity.lower()] += 1
        return cls(summary=counts, findings=findings)

    @property
    def failed(self) -> bool:
        return self.summary.get("fail", 0) > 0

    @property
    def warned(self) -> bool:
        return self.summary.get("warn", 0) > 0
