"""Constants for report documents, atomic writing and stdout formatting."""

from __future__ import annotations

from vulngate.types import Severity

SCHEMA_VERSION: str = "1.0.0"
DEFAULT_REPORT_FILENAME: str = "security-gate-report.json"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

STDOUT_RECOMMENDATIONS_LIMIT: int = 5

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.CRITICAL: ANSI_RED,
    Severity.HIGH: ANSI_RED,
    Severity.MEDIUM: ANSI_YELLOW,
    Severity.LOW: ANSI_GREEN,
    Severity.INFO: ANSI_DIM,
}

PASS_MARK: str = "PASS"
FAIL_MARK: str = "FAIL"
