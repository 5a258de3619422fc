"""Config data model for Vulngate runs."""

from __future__ import annotations

from dataclasses import dataclass

from vulngate.constants.discovery import (
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_SOURCE_EXTENSIONS,
)
from vulngate.model import GateConfig


@dataclass(frozen=True)
class DetectorConfig:
    """Pattern-detector rule toggles."""

    disabled: tuple[str, ...] = ()


@dataclass(frozen=True)
class VulngateConfig:
    """Resolved gate and scanner config."""

    thresholds: GateConfig = GateConfig()
    extensions: tuple[str, ...] = DEFAULT_SOURCE_EXTENSIONS
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    detectors: DetectorConfig = DetectorConfig()
