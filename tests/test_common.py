"""Tests for shared types, ids, coercion helpers and JSON I/O."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from vulngate.ingest.common import as_count, as_positive_int, parse_embedded_json
from vulngate.io import append_output_variable, load_json_file, write_json_atomic
from vulngate.model import SeverityTally
from vulngate.types import Severity
from vulngate.utils import make_finding_id


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("critical", Severity.CRITICAL),
        ("  HIGH ", Severity.HIGH),
        ("Medium", Severity.MEDIUM),
        ("moderate", Severity.MEDIUM),
        ("info", Severity.INFO),
        ("informational", Severity.INFO),
        ("urgent", Severity.LOW),
        ("", Severity.LOW),
        (None, Severity.LOW),
        (3, Severity.LOW),
        (Severity.HIGH, Severity.HIGH),
    ],
)
def test_severity_parse(raw: object, expected: Severity) -> None:
    assert Severity.parse(raw) is expected


def test_severity_rank_orders_classes() -> None:
    ranked = sorted(Severity, key=lambda severity: severity.rank, reverse=True)

    assert ranked == [Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW, Severity.INFO]


def test_tally_to_dict_includes_total() -> None:
    assert SeverityTally(critical=1, info=2).to_dict() == {
        "critical": 1,
        "high": 0,
        "medium": 0,
        "low": 0,
        "info": 2,
        "total": 3,
    }


def test_finding_id_is_deterministic_and_sensitive_to_parts() -> None:
    first = make_finding_id("pattern-detector", "XSS", "a.js", 1, None)

    assert first == make_finding_id("pattern-detector", "XSS", "a.js", 1, None)
    assert first != make_finding_id("pattern-detector", "XSS", "a.js", 2, None)
    assert len(first) == 16


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, 3), ("12", 12), (0, None), (-4, None), (True, None), ("x", None), ("\u00b2", None), (None, None)],
)
def test_as_positive_int(value: object, expected: int | None) -> None:
    assert as_positive_int(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2, 2), (2.9, 2), (-1, 0), ("5", 0), (False, 0), (float("inf"), 0), (float("nan"), 0)],
)
def test_as_count(value: object, expected: int) -> None:
    assert as_count(value) == expected


def test_parse_embedded_json_prefers_whole_document() -> None:
    assert parse_embedded_json('{"a": 1}') == {"a": 1}
    assert parse_embedded_json('Result:\n{"a": {"b": 2}}\nDone') == {"a": {"b": 2}}


def test_parse_embedded_json_raises_when_absent() -> None:
    with pytest.raises(ValueError):
        parse_embedded_json("no braces here")


def test_write_json_atomic_sorts_keys(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.json"

    write_json_atomic(path=target, payload={"b": 1, "a": [1, 2]})

    text = target.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert list(json.loads(text)) == ["a", "b"]
    assert load_json_file(target) == {"a": [1, 2], "b": 1}


def test_write_json_atomic_cleans_up_temp_file_on_failure(tmp_path: Path) -> None:
    target = tmp_path / "out.json"

    with patch("vulngate.io.json_io.json.dump", side_effect=TypeError("not serializable")):
        with pytest.raises(TypeError):
            write_json_atomic(path=target, payload={"a": 1})

    assert list(tmp_path.iterdir()) == []


def test_append_output_variable(tmp_path: Path) -> None:
    target = tmp_path / "github_output"

    append_output_variable(target, "passed", "true")
    append_output_variable(target, "score", "80")

    assert target.read_text(encoding="utf-8") == "passed=true\nscore=80\n"
