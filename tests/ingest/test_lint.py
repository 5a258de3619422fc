"""Tests for ESLint-style report ingestion."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vulngate.ingest import ingest_lint
from vulngate.types import Severity


def test_only_security_rules_are_kept(reports_root: Path) -> None:
    document = json.loads((reports_root / "eslint.json").read_text(encoding="utf-8"))

    result = ingest_lint(document)

    assert [finding.type for finding in result.findings] == [
        "security/detect-object-injection",
        "security/detect-eval-with-expression",
    ]
    first = result.findings[0]
    assert (first.source_file, first.line, first.column) == ("/repo/src/app.js", 4, 9)
    assert first.description == "Generic Object Injection Sink"
    assert first.origin == "lint"


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (1, Severity.MEDIUM),
        (2, Severity.LOW),
        (0, Severity.LOW),
        (True, Severity.LOW),
        ("2", Severity.LOW),
    ],
)
def test_lint_severity_mapping(code: object, expected: Severity) -> None:
    document = [{"filePath": "a.js", "messages": [{"ruleId": "security/x", "severity": code, "message": "m"}]}]

    result = ingest_lint(document)

    assert result.findings[0].severity is expected


def test_messages_without_rule_id_are_ignored() -> None:
    document = [{"filePath": "a.js", "messages": [{"ruleId": None, "severity": 2, "message": "Parsing error"}]}]

    assert ingest_lint(document).findings == ()


def test_non_list_document_is_an_error() -> None:
    result = ingest_lint({"messages": []})

    assert result.findings == ()
    assert result.errors


def test_non_ascii_digit_position_is_dropped_not_fatal() -> None:
    document = [
        {
            "filePath": "a.js",
            "messages": [
                {"ruleId": "security/x", "severity": 1, "message": "m", "line": "²", "column": "3"},
                {"ruleId": "security/y", "severity": 2, "message": "n", "line": 5},
            ],
        }
    ]

    result = ingest_lint(document)

    assert [(finding.line, finding.column) for finding in result.findings] == [(None, 3), (5, None)]
