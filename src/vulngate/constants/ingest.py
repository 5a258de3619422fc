"""Constants for report ingestion and report-kind detection."""

from __future__ import annotations

from vulngate.types import ReportKind, Severity

AI_ANALYSIS_KIND: ReportKind = "ai-analysis"
DEPENDENCY_AUDIT_KIND: ReportKind = "dependency-audit"
LINT_KIND: ReportKind = "lint"
VALID_REPORT_KINDS: frozenset[str] = frozenset({AI_ANALYSIS_KIND, DEPENDENCY_AUDIT_KIND, LINT_KIND})

# File-name fragments checked in order; first match wins.
REPORT_KIND_FILENAME_HINTS: tuple[tuple[str, ReportKind], ...] = (
    ("bedrock", AI_ANALYSIS_KIND),
    ("security-analysis", AI_ANALYSIS_KIND),
    ("ai-analysis", AI_ANALYSIS_KIND),
    ("npm-audit", DEPENDENCY_AUDIT_KIND),
    ("snyk", DEPENDENCY_AUDIT_KIND),
    ("eslint", LINT_KIND),
    ("audit", DEPENDENCY_AUDIT_KIND),
    ("lint", LINT_KIND),
)

AI_FILE_ANALYSIS_KEYS: tuple[str, ...] = ("fileAnalysis", "files")
AI_OVERALL_COUNT_KEYS: dict[Severity, str] = {
    Severity.CRITICAL: "critical_issues",
    Severity.HIGH: "high_issues",
    Severity.MEDIUM: "medium_issues",
    Severity.LOW: "low_issues",
}
DEFAULT_COMPLIANCE_STATUS: dict[str, str] = {
    "soc2": "Unknown",
    "pci_dss": "Unknown",
    "gdpr": "Unknown",
}
UNKNOWN_FINDING_TYPE: str = "Unknown"

VULNERABLE_DEPENDENCY_TYPE: str = "Vulnerable Dependency"

LINT_SECURITY_RULE_MARKER: str = "security"
# Fixed lint mapping: warnings (1) count as medium, errors (2) as low.
LINT_SEVERITY_MAP: dict[int, Severity] = {
    1: Severity.MEDIUM,
    2: Severity.LOW,
}
