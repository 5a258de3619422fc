"""Constants for the security score, risk levels and ranking."""

from __future__ import annotations

from vulngate.types import Severity

SEVERITY_WEIGHTS: dict[Severity, int] = {
    Severity.CRITICAL: 40,
    Severity.HIGH: 30,
    Severity.MEDIUM: 20,
    Severity.LOW: 10,
    Severity.INFO: 0,
}

# Weighted-issue total at which the score bottoms out at 0.
MAX_WEIGHTED_ISSUES: int = 100
MAX_SECURITY_SCORE: int = 100

# Risk level cut points. These intentionally differ from the score weights.
RISK_HIGH_MIN_HIGH_COUNT: int = 4
RISK_MEDIUM_MIN_MEDIUM_COUNT: int = 6

TOP_FINDINGS_DEFAULT_LIMIT: int = 5
