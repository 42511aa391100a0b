# src/sui_dev_tools/domain/models/diagnostics.py
"""
Domain models for compiler diagnostics and test verdicts.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional, Tuple


class Severity(Enum):
    """Severity of a compiler diagnostic."""
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class DiagnosticLocation:
    """Source position reported by the diagnostic renderer."""
    file: str
    line: int
    column: int


@dataclass(frozen=True, order=True)
class DiagnosticKey:
    """Identity of a diagnostic. Two records with the same key are the same diagnostic."""
    file: str
    line: int
    column: int
    code: str


@dataclass
class DiagnosticRecord:
    """A single warning or error extracted from compiler output."""
    location: DiagnosticLocation
    code: str
    severity: Severity
    body: str  # Verbatim block text, trimmed

    @property
    def key(self) -> DiagnosticKey:
        return DiagnosticKey(
            file=self.location.file,
            line=self.location.line,
            column=self.location.column,
            code=self.code,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to the payload shape returned to callers."""
        return {
            "code": self.code,
            "severity": self.severity.value,
            "file": self.location.file,
            "line": self.location.line,
            "column": self.location.column,
            "message": self.body,
        }


@dataclass
class DiagnosticSet:
    """
    Warnings and errors keyed by identity.

    Adding a record whose key is already present replaces the earlier one,
    so at most one record survives per identity.
    """
    warnings: Dict[DiagnosticKey, DiagnosticRecord] = field(default_factory=dict)
    errors: Dict[DiagnosticKey, DiagnosticRecord] = field(default_factory=dict)

    def add(self, record: DiagnosticRecord) -> None:
        target = self.warnings if record.severity is Severity.WARNING else self.errors
        target[record.key] = record

    def merge(self, other: "DiagnosticSet") -> None:
        """Merge another set into this one. Records from `other` win on identity clashes."""
        self.warnings.update(other.warnings)
        self.errors.update(other.errors)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def sorted_warnings(self) -> List[DiagnosticRecord]:
        return [self.warnings[key] for key in sorted(self.warnings)]

    def sorted_errors(self) -> List[DiagnosticRecord]:
        return [self.errors[key] for key in sorted(self.errors)]

    def __len__(self) -> int:
        return len(self.warnings) + len(self.errors)


class VerdictStatus(Enum):
    """Outcome of a test run."""
    PASSED = "passed"
    FAILED = "failed"
    UNKNOWN = "unknown"  # No recognizable terminal marker in the output


@dataclass(frozen=True)
class TestVerdict:
    """Classified outcome of a test run, with the failure detail when it failed."""
    __test__ = False  # Not a pytest test class

    status: VerdictStatus
    detail: Optional[str] = None

    @classmethod
    def passed(cls) -> "TestVerdict":
        return cls(VerdictStatus.PASSED)

    @classmethod
    def failed(cls, detail: str) -> "TestVerdict":
        return cls(VerdictStatus.FAILED, detail)

    @classmethod
    def unknown(cls) -> "TestVerdict":
        return cls(VerdictStatus.UNKNOWN)

    def to_payload(self) -> Optional[str]:
        """
        Render the verdict the way callers receive it.

        Returns:
            "PASSED", "FAILED:\\n\\n<detail>", or None when the outcome is unknown.
        """
        if self.status is VerdictStatus.PASSED:
            return "PASSED"
        if self.status is VerdictStatus.FAILED:
            return f"FAILED:\n\n{(self.detail or '').strip()}"
        return None


@dataclass(frozen=True)
class ValidationResult:
    """Result of one validate invocation. Built once and never mutated."""
    warnings: Tuple[DiagnosticRecord, ...] = ()
    errors: Tuple[DiagnosticRecord, ...] = ()
    verdict: Optional[TestVerdict] = None  # None when the build failed and tests never ran

    def to_payload(self) -> Dict[str, Any]:
        return {
            "warnings": [record.to_dict() for record in self.warnings],
            "buildErrors": [record.to_dict() for record in self.errors],
            "testResults": self.verdict.to_payload() if self.verdict is not None else None,
        }
