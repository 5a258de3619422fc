"""Ingestion of AI code-review analysis documents.

Accepted shapes, all optional and combinable::

    {"vulnerabilities": [...]}
    {"fileAnalysis": [{"file": "...", "analysis": "<json string or object>"}]}
    {"files": [{"file": "...", "analysis": {...}}]}
    {"overallAnalysis": "<json string or object>", "recommendations": [...]}

A nested ``analysis`` string that cannot be parsed contributes nothing; the
remaining entries are still ingested.
"""

from __future__ import annotations

import logging

from vulngate.constants.ingest import (
    AI_FILE_ANALYSIS_KEYS,
    AI_OVERALL_COUNT_KEYS,
    DEFAULT_COMPLIANCE_STATUS,
    UNKNOWN_FINDING_TYPE,
)
from vulngate.ingest.common import as_count, as_string_list, as_text, build_finding, parse_embedded_json
from vulngate.model import Finding, IngestResult, SeverityTally

logger = logging.getLogger(__name__)

AI_ANALYSIS_ORIGIN = "ai-analysis"


def ingest_ai_analysis(document: object) -> IngestResult:
    """Normalize an AI analysis document into findings and report-level data."""
    if not isinstance(document, dict):
        return IngestResult(errors=("AI analysis report must be a JSON object",))

    findings: list[Finding] = []
    recommendations: list[str] = as_string_list(document.get("recommendations"))
    errors: list[str] = []

    findings.extend(_vulnerability_findings(document.get("vulnerabilities"), source_file="", offset=0))

    for key in AI_FILE_ANALYSIS_KEYS:
        entries = document.get(key)
        if not isinstance(entries, list):
            continue
        for position, entry in enumerate(entries):
            if not isinstance(entry, dict):
                continue
            source_file = as_text(entry.get("file"))
            raw_analysis = entry.get("analysis")
            if raw_analysis is None or raw_analysis == "":
                continue
            analysis = _resolve_analysis(raw_analysis)
            if analysis is None:
                message = f"Skipped unparseable analysis for {source_file or f'{key}[{position}]'}"
                logger.debug(message)
                errors.append(message)
                continue
            findings.extend(
                _vulnerability_findings(
                    analysis.get("vulnerabilities"),
                    source_file=source_file,
                    offset=len(findings),
                )
            )
            recommendations.extend(as_string_list(analysis.get("recommended_actions")))

    compliance: dict[str, str] = {}
    reported_counts = SeverityTally()
    if "overallAnalysis" in document:
        overall = _resolve_analysis(document.get("overallAnalysis"))
        if overall is None:
            errors.append("Skipped unparseable overallAnalysis")
        else:
            reported_counts = SeverityTally.from_counts(
                {severity: as_count(overall.get(key)) for severity, key in AI_OVERALL_COUNT_KEYS.items()}
            )
            recommendations.extend(as_string_list(overall.get("recommended_actions")))
            compliance = _compliance_status(overall.get("compliance_status"))

    return IngestResult(
        findings=tuple(findings),
        recommendations=tuple(recommendations),
        compliance=compliance,
        reported_counts=reported_counts,
        errors=tuple(errors),
    )


def _resolve_analysis(raw: object) -> dict[str, object] | None:
    """Return the analysis object, parsing it first when it arrives as a string."""
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        parsed = parse_embedded_json(raw)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def _vulnerability_findings(raw: object, *, source_file: str, offset: int) -> list[Finding]:
    if not isinstance(raw, list):
        return []
    return [
        build_finding(
            entry,
            origin=AI_ANALYSIS_ORIGIN,
            index=offset + position,
            source_file=source_file,
            default_type=UNKNOWN_FINDING_TYPE,
        )
        for position, entry in enumerate(raw)
        if isinstance(entry, dict)
    ]


def _compliance_status(raw: object) -> dict[str, str]:
    status = dict(DEFAULT_COMPLIANCE_STATUS)
    if isinstance(raw, dict):
        status.update({str(name): str(value) for name, value in raw.items() if value is not None})
    return status
