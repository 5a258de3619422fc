"""Severity tallies and per-type counts over finding sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from vulngate.constants.scoring import TOP_FINDINGS_DEFAULT_LIMIT
from vulngate.model import Finding, SeverityTally


def aggregate(findings: Iterable[Finding]) -> SeverityTally:
    """Count findings by severity in a single pass.

    Severities are trusted as already normalized by the detector or
    ingestor that produced the findings.
    """
    counts = Counter(finding.severity for finding in findings)
    return SeverityTally.from_counts(counts)


def aggregate_all(*finding_groups: Iterable[Finding]) -> SeverityTally:
    """Tally several independent finding sequences together."""
    return merge_tallies(aggregate(group) for group in finding_groups)


def merge_tallies(tallies: Iterable[SeverityTally]) -> SeverityTally:
    """Sum tallies class by class."""
    merged = SeverityTally()
    for tally in tallies:
        merged = merged + tally
    return merged


def type_counts(findings: Iterable[Finding]) -> dict[str, int]:
    """Count findings by type with deterministic key order."""
    counts = Counter(finding.type for finding in findings)
    return {finding_type: counts[finding_type] for finding_type in sorted(counts)}


def origin_counts(findings: Iterable[Finding]) -> dict[str, int]:
    """Count findings by the detector or ingestor that produced them."""
    counts = Counter(finding.origin for finding in findings)
    return {origin: counts[origin] for origin in sorted(counts)}


def sorted_top_findings(
    findings: Iterable[Finding],
    limit: int = TOP_FINDINGS_DEFAULT_LIMIT,
) -> list[Finding]:
    """Return the most severe findings sorted deterministically."""
    return sorted(findings, key=lambda finding: (-finding.severity.rank, finding.id))[:limit]
