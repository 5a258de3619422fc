"""Remediation guidance collection."""

from __future__ import annotations

from collections.abc import Iterable

from vulngate.model import Finding


def extract_recommendations(
    findings: Iterable[Finding],
    report_recommendations: Iterable[str] = (),
) -> list[str]:
    """Collect remediation strings, dropping exact duplicates.

    Finding recommendations come first in finding order, followed by
    report-level ones. The first occurrence of each string is kept.
    """
    seen: set[str] = set()
    ordered: list[str] = []

    def _add(text: str | None) -> None:
        if not text or not text.strip() or text in seen:
            return
        seen.add(text)
        ordered.append(text)

    for finding in findings:
        _add(finding.recommendation)
    for text in report_recommendations:
        _add(text)
    return ordered
