"""Tests for severity aggregation and supplemental counts."""

from __future__ import annotations

import random
from collections.abc import Callable

from vulngate.model import Finding, SeverityTally
from vulngate.scanner.aggregate import (
    aggregate,
    aggregate_all,
    merge_tallies,
    origin_counts,
    sorted_top_findings,
    type_counts,
)
from vulngate.types import Severity


def _mixed(make_finding: Callable[..., Finding]) -> list[Finding]:
    severities = [Severity.CRITICAL, Severity.HIGH, Severity.HIGH, Severity.MEDIUM, Severity.LOW, Severity.INFO]
    return [make_finding(f"f-{index}", severity=severity) for index, severity in enumerate(severities)]


def test_aggregate_counts_each_class(make_finding: Callable[..., Finding]) -> None:
    tally = aggregate(_mixed(make_finding))

    assert tally == SeverityTally(critical=1, high=2, medium=1, low=1, info=1)
    assert tally.total == 6


def test_aggregate_empty_input_is_all_zero() -> None:
    assert aggregate([]) == SeverityTally()


def test_aggregate_is_order_independent(make_finding: Callable[..., Finding]) -> None:
    findings = _mixed(make_finding)
    shuffled = list(findings)
    random.Random(7).shuffle(shuffled)

    assert aggregate(findings) == aggregate(shuffled) == aggregate(reversed(findings))


def test_aggregate_conserves_count(make_finding: Callable[..., Finding]) -> None:
    findings = _mixed(make_finding) * 3

    assert aggregate(findings).total == len(findings)


def test_aggregate_all_and_merge_tallies_agree(make_finding: Callable[..., Finding]) -> None:
    left = [make_finding("a", severity=Severity.CRITICAL)]
    right = [make_finding("b", severity=Severity.LOW), make_finding("c", severity=Severity.LOW)]

    combined = aggregate_all(left, right)

    assert combined == merge_tallies([aggregate(left), aggregate(right)])
    assert combined == aggregate(left) + aggregate(right)
    assert combined == SeverityTally(critical=1, low=2)


def test_type_and_origin_counts_are_sorted(make_finding: Callable[..., Finding]) -> None:
    findings = [
        make_finding("a", finding_type="XSS", origin="lint"),
        make_finding("b", finding_type="Hardcoded Secret"),
        make_finding("c", finding_type="XSS", origin="ai-analysis"),
    ]

    assert list(type_counts(findings).items()) == [("Hardcoded Secret", 1), ("XSS", 2)]
    assert list(origin_counts(findings).items()) == [("ai-analysis", 1), ("lint", 1), ("pattern-detector", 1)]


def test_sorted_top_findings_orders_by_severity_then_id(make_finding: Callable[..., Finding]) -> None:
    findings = [
        make_finding("z", severity=Severity.LOW),
        make_finding("b", severity=Severity.CRITICAL),
        make_finding("a", severity=Severity.CRITICAL),
        make_finding("m", severity=Severity.HIGH),
    ]

    top = sorted_top_findings(findings, limit=3)

    assert [finding.id for finding in top] == ["a", "b", "m"]


def test_sorted_top_findings_defaults_to_five(make_finding: Callable[..., Finding]) -> None:
    findings = [make_finding(f"f-{index}") for index in range(8)]

    assert len(sorted_top_findings(findings)) == 5
