"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "vulngate.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {"thresholds", "extensions", "exclude_dirs", "max_file_mb", "detectors"}
)
ALLOWED_DETECTOR_KEYS: frozenset[str] = frozenset({"disabled"})
ALLOWED_THRESHOLD_KEYS: frozenset[str] = frozenset({"critical", "high", "medium", "low"})
