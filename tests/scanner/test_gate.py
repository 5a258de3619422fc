"""Tests for gate evaluation against thresholds."""

from __future__ import annotations

import pytest

from vulngate.exceptions import ConfigError
from vulngate.model import GateConfig, SeverityTally
from vulngate.scanner.gate import evaluate_gate
from vulngate.types import Severity


def test_default_config_values() -> None:
    assert GateConfig().to_dict() == {"critical": 0, "high": 3, "medium": 10, "low": 50}


def test_clean_tally_passes_default_gate() -> None:
    verdict = evaluate_gate(SeverityTally(), GateConfig())

    assert verdict.passed is True
    assert verdict.failures() == ()


def test_single_critical_fails_default_gate() -> None:
    verdict = evaluate_gate(SeverityTally(critical=1), GateConfig())

    assert verdict.passed is False
    assert [check.severity for check in verdict.failures()] == [Severity.CRITICAL]


def test_four_high_fails_on_high_only() -> None:
    verdict = evaluate_gate(SeverityTally(high=4), GateConfig())

    assert [check.severity for check in verdict.failures()] == [Severity.HIGH]
    high = verdict.check(Severity.HIGH)
    assert high is not None
    assert (high.count, high.threshold, high.passed) == (4, 3, False)


def test_count_equal_to_threshold_passes() -> None:
    verdict = evaluate_gate(SeverityTally(high=3, medium=10, low=50), GateConfig())

    assert verdict.passed is True


def test_info_is_never_gated() -> None:
    verdict = evaluate_gate(SeverityTally(info=10_000), GateConfig())

    assert verdict.passed is True
    assert verdict.check(Severity.INFO) is None


def test_any_single_failure_fails_overall() -> None:
    verdict = evaluate_gate(SeverityTally(low=51), GateConfig())

    assert verdict.passed is False
    assert verdict.to_dict()["low"] == {"count": 51, "threshold": 50, "passed": False}


def test_gate_is_deterministic() -> None:
    tally = SeverityTally(critical=0, high=2, medium=11, low=1)
    config = GateConfig(critical=1, high=2, medium=10, low=0)

    assert evaluate_gate(tally, config) == evaluate_gate(tally, config)


@pytest.mark.parametrize("value", [-1, 1.5, "3", True, None])
def test_invalid_thresholds_are_rejected(value: object) -> None:
    with pytest.raises(ConfigError, match="thresholds.high"):
        GateConfig(high=value)  # type: ignore[arg-type]
