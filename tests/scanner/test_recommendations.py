"""Tests for recommendation extraction."""

from __future__ import annotations

from collections.abc import Callable

from vulngate.model import Finding
from vulngate.scanner.recommendations import extract_recommendations


def test_duplicates_are_dropped_keeping_first_seen_order(make_finding: Callable[..., Finding]) -> None:
    findings = [
        make_finding("a", recommendation="Use parameterized queries"),
        make_finding("b", recommendation="Use HTTPS"),
        make_finding("c", recommendation="Use parameterized queries"),
    ]

    assert extract_recommendations(findings) == ["Use parameterized queries", "Use HTTPS"]


def test_missing_and_blank_recommendations_are_skipped(make_finding: Callable[..., Finding]) -> None:
    findings = [make_finding("a"), make_finding("b", recommendation="   "), make_finding("c", recommendation="Fix")]

    assert extract_recommendations(findings) == ["Fix"]


def test_report_recommendations_follow_finding_recommendations(make_finding: Callable[..., Finding]) -> None:
    findings = [make_finding("a", recommendation="Rotate keys")]

    result = extract_recommendations(findings, ["Enable MFA", "Rotate keys", ""])

    assert result == ["Rotate keys", "Enable MFA"]


def test_dedupe_is_exact_string_equality(make_finding: Callable[..., Finding]) -> None:
    findings = [make_finding("a", recommendation="Use HTTPS"), make_finding("b", recommendation="use https")]

    assert extract_recommendations(findings) == ["Use HTTPS", "use https"]


def test_empty_input_yields_empty_list() -> None:
    assert extract_recommendations([]) == []
