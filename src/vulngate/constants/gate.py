"""Default security gate thresholds."""

from __future__ import annotations

from vulngate.types import Severity

DEFAULT_MAX_CRITICAL: int = 0
DEFAULT_MAX_HIGH: int = 3
DEFAULT_MAX_MEDIUM: int = 10
DEFAULT_MAX_LOW: int = 50

# Severities that carry a threshold. Informational findings never fail a gate.
GATED_SEVERITIES: tuple[Severity, ...] = (
    Severity.CRITICAL,
    Severity.HIGH,
    Severity.MEDIUM,
    Severity.LOW,
)

GITHUB_OUTPUT_ENV: str = "GITHUB_OUTPUT"
