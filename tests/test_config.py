"""Tests for config loading and validation."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from vulngate.config import VulngateConfig, load_config
from vulngate.constants.discovery import DEFAULT_EXCLUDED_DIRS, DEFAULT_SOURCE_EXTENSIONS
from vulngate.exceptions import ConfigError
from vulngate.model import GateConfig


def _write_config(root: Path, body: str) -> Path:
    path = root / "vulngate.yaml"
    path.write_text(body, encoding="utf-8")
    return path


def test_missing_config_yields_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == VulngateConfig()
    assert config.thresholds == GateConfig()
    assert config.extensions == DEFAULT_SOURCE_EXTENSIONS
    assert config.exclude_dirs == DEFAULT_EXCLUDED_DIRS


def test_empty_config_yields_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    assert load_config(tmp_path) == VulngateConfig()


def test_partial_thresholds_merge_with_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "thresholds:\n  high: 0\n  low: 5\n")

    config = load_config(tmp_path)

    assert config.thresholds == GateConfig(critical=0, high=0, medium=10, low=5)


def test_extensions_are_normalized(tmp_path: Path) -> None:
    _write_config(tmp_path, "extensions: [PY, .ts, py, ' ']\nexclude_dirs: [generated]\nmax_file_mb: 5\n")

    config = load_config(tmp_path)

    assert config.extensions == (".py", ".ts")
    assert config.exclude_dirs == ("generated",)
    assert config.max_file_mb == 5


def test_disabled_detectors_are_loaded(tmp_path: Path) -> None:
    _write_config(tmp_path, "detectors:\n  disabled: [WEAK_CRYPTO]\n")

    assert load_config(tmp_path).detectors.disabled == ("WEAK_CRYPTO",)


def test_explicit_config_path(tmp_path: Path) -> None:
    explicit = tmp_path / "ci" / "gate.yaml"
    explicit.parent.mkdir()
    explicit.write_text("thresholds:\n  critical: 2\n", encoding="utf-8")

    assert load_config(tmp_path, explicit).thresholds.critical == 2


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("thresholds: [1, 2]\n", "thresholds must be a mapping"),
        ("thresholds:\n  high: -1\n", "thresholds.high must be a non-negative integer"),
        ("thresholds:\n  medium: ten\n", "thresholds.medium must be a non-negative integer"),
        ("thresholds:\n  info: 3\n", "Unknown config key `thresholds.info`"),
        ("threshold:\n  high: 1\n", "did you mean `thresholds`"),
        ("extensions: .py\n", "extensions must be a list of strings"),
        ("extensions: []\n", "at least one file extension"),
        ("max_file_mb: 0\n", "max_file_mb must be a positive integer"),
        ("detectors:\n  disabled: [NOT_A_RULE]\n", "unknown rules: NOT_A_RULE"),
        ("- just\n- a list\n", "must be a YAML mapping"),
        ("thresholds: {high: [\n", "Invalid YAML"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, body: str, message: str) -> None:
    _write_config(tmp_path, body)

    with pytest.raises(ConfigError, match=re.escape(message)):
        load_config(tmp_path)


def test_config_error_is_a_value_error(tmp_path: Path) -> None:
    _write_config(tmp_path, "max_file_mb: -3\n")

    with pytest.raises(ValueError):
        load_config(tmp_path)
