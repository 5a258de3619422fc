"""Ingestion of ESLint-style JSON reports."""

from __future__ import annotations

from vulngate.constants.ingest import LINT_SECURITY_RULE_MARKER, LINT_SEVERITY_MAP
from vulngate.ingest.common import as_text, build_finding
from vulngate.model import Finding, IngestResult
from vulngate.types import Severity

LINT_ORIGIN = "lint"


def ingest_lint(document: object) -> IngestResult:
    """Turn security-rule lint messages into findings.

    Only messages whose ``ruleId`` contains ``security`` are kept. Lint
    severity ``1`` maps to medium and ``2`` to low; other codes map to low.
    """
    if not isinstance(document, list):
        return IngestResult(errors=("Lint report must be a JSON list of file results",))

    findings: list[Finding] = []
    for file_result in document:
        if not isinstance(file_result, dict):
            continue
        messages = file_result.get("messages")
        if not isinstance(messages, list):
            continue
        source_file = as_text(file_result.get("filePath"))
        for message in messages:
            if not isinstance(message, dict):
                continue
            rule_id = message.get("ruleId")
            if not isinstance(rule_id, str) or LINT_SECURITY_RULE_MARKER not in rule_id:
                continue
            findings.append(
                build_finding(
                    {
                        "type": rule_id,
                        "description": message.get("message"),
                        "line": message.get("line"),
                        "column": message.get("column"),
                    },
                    origin=LINT_ORIGIN,
                    index=len(findings),
                    source_file=source_file,
                    default_type=rule_id,
                    severity=_lint_severity(message.get("severity")),
                )
            )
    return IngestResult(findings=tuple(findings))


def _lint_severity(code: object) -> Severity:
    if isinstance(code, bool) or not isinstance(code, int):
        return Severity.LOW
    return LINT_SEVERITY_MAP.get(code, Severity.LOW)
