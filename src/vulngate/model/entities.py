"""Frozen value objects shared by the detector, ingestors and gate."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from vulngate.constants.gate import (
    DEFAULT_MAX_CRITICAL,
    DEFAULT_MAX_HIGH,
    DEFAULT_MAX_LOW,
    DEFAULT_MAX_MEDIUM,
    GATED_SEVERITIES,
)
from vulngate.exceptions import ConfigError
from vulngate.types import FindingOrigin, JsonObject, RiskLevel, Severity


@dataclass(frozen=True)
class Finding:
    """Normalized vulnerability record produced by a detector or ingestor."""

    id: str
    type: str
    severity: Severity
    source_file: str
    description: str
    origin: FindingOrigin
    line: int | None = None
    column: int | None = None
    recommendation: str | None = None

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-compatible mapping."""
        return {
            "id": self.id,
            "type": self.type,
            "severity": self.severity.value,
            "sourceFile": self.source_file,
            "line": self.line,
            "column": self.column,
            "description": self.description,
            "recommendation": self.recommendation,
            "origin": self.origin,
        }


@dataclass(frozen=True)
class SeverityTally:
    """Per-severity finding counts for one scan run."""

    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    info: int = 0

    @classmethod
    def from_counts(cls, counts: Mapping[Severity, int]) -> SeverityTally:
        """Build a tally from a severity-keyed mapping; missing classes count as zero."""
        return cls(
            critical=counts.get(Severity.CRITICAL, 0),
            high=counts.get(Severity.HIGH, 0),
            medium=counts.get(Severity.MEDIUM, 0),
            low=counts.get(Severity.LOW, 0),
            info=counts.get(Severity.INFO, 0),
        )

    @property
    def total(self) -> int:
        """Sum across all five severity classes."""
        return self.critical + self.high + self.medium + self.low + self.info

    def count(self, severity: Severity) -> int:
        """Return the count for one severity class."""
        match severity:
            case Severity.CRITICAL:
                return self.critical
            case Severity.HIGH:
                return self.high
            case Severity.MEDIUM:
                return self.medium
            case Severity.LOW:
                return self.low
            case Severity.INFO:
                return self.info

    def __add__(self, other: object) -> SeverityTally:
        if not isinstance(other, SeverityTally):
            return NotImplemented
        return SeverityTally(
            critical=self.critical + other.critical,
            high=self.high + other.high,
            medium=self.medium + other.medium,
            low=self.low + other.low,
            info=self.info + other.info,
        )

    def to_dict(self) -> JsonObject:
        return {
            "critical": self.critical,
            "high": self.high,
            "medium": self.medium,
            "low": self.low,
            "info": self.info,
            "total": self.total,
        }


@dataclass(frozen=True)
class GateConfig:
    """Maximum allowed finding count per gated severity.

    A threshold of 0 means zero tolerance. Thresholds must be non-negative
    integers; anything else raises ``ConfigError`` at construction time.
    """

    critical: int = DEFAULT_MAX_CRITICAL
    high: int = DEFAULT_MAX_HIGH
    medium: int = DEFAULT_MAX_MEDIUM
    low: int = DEFAULT_MAX_LOW

    def __post_init__(self) -> None:
        for severity in GATED_SEVERITIES:
            value = getattr(self, severity.value)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"thresholds.{severity.value} must be a non-negative integer, got {value!r}")

    def threshold(self, severity: Severity) -> int | None:
        """Return the threshold for a severity, or ``None`` for ungated ``info``."""
        match severity:
            case Severity.CRITICAL:
                return self.critical
            case Severity.HIGH:
                return self.high
            case Severity.MEDIUM:
                return self.medium
            case Severity.LOW:
                return self.low
            case Severity.INFO:
                return None

    def to_dict(self) -> dict[str, int]:
        return {
            "critical": self.critical,
            "high": self.high,
            "medium": self.medium,
            "low": self.low,
        }


@dataclass(frozen=True)
class SeverityCheck:
    """Gate outcome for a single severity class."""

    severity: Severity
    count: int
    threshold: int
    passed: bool

    def to_dict(self) -> JsonObject:
        return {"count": self.count, "threshold": self.threshold, "passed": self.passed}


@dataclass(frozen=True)
class GateVerdict:
    """Pass/fail decision for one scan run."""

    checks: tuple[SeverityCheck, ...]

    @property
    def passed(self) -> bool:
        """Logical AND across every gated severity."""
        return all(check.passed for check in self.checks)

    def check(self, severity: Severity) -> SeverityCheck | None:
        """Return the check for *severity*, or ``None`` when it is not gated."""
        for item in self.checks:
            if item.severity is severity:
                return item
        return None

    def failures(self) -> tuple[SeverityCheck, ...]:
        """Checks whose count exceeded the threshold."""
        return tuple(check for check in self.checks if not check.passed)

    def to_dict(self) -> JsonObject:
        payload: JsonObject = {"passed": self.passed}
        for check in self.checks:
            payload[check.severity.value] = check.to_dict()
        return payload


@dataclass(frozen=True)
class IngestResult:
    """Everything extracted from one heterogeneous scanner report."""

    findings: tuple[Finding, ...] = ()
    recommendations: tuple[str, ...] = ()
    compliance: dict[str, str] = field(default_factory=dict)
    reported_counts: SeverityTally = SeverityTally()
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class GateReport:
    """Unified output document for one scan run."""

    schema_version: str
    tally: SeverityTally
    score: int
    risk_level: RiskLevel
    verdict: GateVerdict
    recommendations: tuple[str, ...]
    counts_by_type: dict[str, int]
    counts_by_origin: dict[str, int]
    top_findings: tuple[Finding, ...]
    findings: tuple[Finding, ...]
    compliance: dict[str, str]
    scanned_files: int = 0
    warnings: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.verdict.passed

    def to_dict(self) -> JsonObject:
        """Serialize with the stable camelCase field names consumed by adapters."""
        return {
            "schemaVersion": self.schema_version,
            "severityTally": self.tally.to_dict(),
            "score": self.score,
            "riskLevel": self.risk_level,
            "gateVerdict": self.verdict.to_dict(),
            "recommendations": list(self.recommendations),
            "countsByType": dict(self.counts_by_type),
            "countsByOrigin": dict(self.counts_by_origin),
            "topFindings": [finding.to_dict() for finding in self.top_findings],
            "findings": [finding.to_dict() for finding in self.findings],
            "compliance": dict(self.compliance),
            "scannedFiles": self.scanned_files,
            "warnings": list(self.warnings),
        }
