"""Config loading and normalization for Vulngate runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from vulngate.config.model import DetectorConfig, VulngateConfig
from vulngate.constants.config import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_DETECTOR_KEYS,
    ALLOWED_THRESHOLD_KEYS,
    CONFIG_FILENAME,
)
from vulngate.constants.discovery import (
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_SOURCE_EXTENSIONS,
)
from vulngate.detectors import DETECTOR_CLASSES
from vulngate.exceptions import ConfigError
from vulngate.model import GateConfig


def load_config(root: Path | None, config_path: Path | None = None) -> VulngateConfig:
    """Load and validate config from ``vulngate.yaml`` or an explicit path.

    Without an explicit path, a missing ``vulngate.yaml`` under *root* means
    defaults. Every problem raises ``ConfigError``.
    """
    if config_path is None and root is None:
        return VulngateConfig()
    if config_path is not None:
        path = config_path.resolve()
    else:
        assert root is not None
        path = root.resolve() / CONFIG_FILENAME
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return VulngateConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    _reject_unknown_keys(raw, ALLOWED_CONFIG_KEYS, "")

    thresholds_raw = _ensure_mapping(raw.get("thresholds"), "thresholds")
    _reject_unknown_keys(thresholds_raw, ALLOWED_THRESHOLD_KEYS, "thresholds.")
    defaults = GateConfig()
    thresholds = GateConfig(
        critical=thresholds_raw.get("critical", defaults.critical),
        high=thresholds_raw.get("high", defaults.high),
        medium=thresholds_raw.get("medium", defaults.medium),
        low=thresholds_raw.get("low", defaults.low),
    )

    detectors_raw = _ensure_mapping(raw.get("detectors"), "detectors")
    _reject_unknown_keys(detectors_raw, ALLOWED_DETECTOR_KEYS, "detectors.")
    disabled = tuple(_ensure_string_list(detectors_raw.get("disabled", []), "detectors.disabled"))
    known_rules = {detector_cls.rule_id for detector_cls in DETECTOR_CLASSES}
    unknown_rules = sorted(set(disabled) - known_rules)
    if unknown_rules:
        raise ConfigError(f"detectors.disabled references unknown rules: {', '.join(unknown_rules)}")

    max_file_mb = raw.get("max_file_mb", DEFAULT_MAX_FILE_MB)
    if isinstance(max_file_mb, bool) or not isinstance(max_file_mb, int) or max_file_mb <= 0:
        raise ConfigError("max_file_mb must be a positive integer")

    return VulngateConfig(
        thresholds=thresholds,
        extensions=_normalize_extensions(
            _ensure_string_list(raw.get("extensions", list(DEFAULT_SOURCE_EXTENSIONS)), "extensions")
        ),
        exclude_dirs=tuple(
            name.strip()
            for name in _ensure_string_list(raw.get("exclude_dirs", list(DEFAULT_EXCLUDED_DIRS)), "exclude_dirs")
            if name.strip()
        ),
        max_file_mb=max_file_mb,
        detectors=DetectorConfig(disabled=disabled),
    )


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _normalize_extensions(extensions: list[str]) -> tuple[str, ...]:
    """Lowercase, dot-prefix and deduplicate file extensions, keeping order."""
    normalized: list[str] = []
    for ext in extensions:
        cleaned = ext.strip().lower()
        if not cleaned:
            continue
        if not cleaned.startswith("."):
            cleaned = f".{cleaned}"
        if cleaned not in normalized:
            normalized.append(cleaned)
    if not normalized:
        raise ConfigError("extensions must list at least one file extension")
    return tuple(normalized)


def _reject_unknown_keys(raw: dict[str, Any], allowed: frozenset[str], prefix: str) -> None:
    unknown = sorted(str(key) for key in raw if key not in allowed)
    if not unknown:
        return
    key = unknown[0]
    hint = _suggest_key(key, allowed)
    message = f"Unknown config key `{prefix}{key}`"
    raise ConfigError(f"{message} ({hint})" if hint else message)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
