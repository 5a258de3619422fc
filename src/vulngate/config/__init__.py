"""Configuration loading, validation, and normalization for Vulngate runs."""

from __future__ import annotations

from vulngate.config.loader import load_config
from vulngate.config.model import DetectorConfig, VulngateConfig

__all__ = [
    "DetectorConfig",
    "VulngateConfig",
    "load_config",
]
