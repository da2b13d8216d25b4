"""
Validation result models.

Every validator returns a ValidationResult carrying zero or more findings.
A FAIL finding blocks the git operation; a WARN finding is advisory.
"""

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """Outcome of a single check."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


@dataclass
class Finding:
    """A single problem reported by a check."""

    check: str
    severity: Severity
    message: str
    path: str | None = None
    line: int | None = None

    @property
    def location(self) -> str | None:
        """path:line when both are known, path alone otherwise."""
        if self.path is None:
            return None
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"


@dataclass
class ValidationResult:
    """Aggregated findings of one or more checks."""

    findings: list[Finding] = field(default_factory=list)

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.FAIL]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.WARN]

    @property
    def status(self) -> Severity:
        if self.errors:
            return Severity.FAIL
        if self.warnings:
            return Severity.WARN
        return Severity.PASS

    @property
    def passed(self) -> bool:
        """True unless a blocking finding was recorded."""
        return self.status != Severity.FAIL

    def fail(self, check: str, message: str, path: str | None = None, line: int | None = None) -> None:
        self.findings.append(Finding(check, Severity.FAIL, message, path, line))

    def warn(self, check: str, message: str, path: str | None = None, line: int | None = None) -> None:
        self.findings.append(Finding(check, Severity.WARN, message, path, line))

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Append another result's findings to this one and return self."""
        self.findings.extend(other.findings)
        return self
