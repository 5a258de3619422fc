"""Security score and risk level for a severity tally.

The score is a blunt linear penalty: every finding subtracts its severity
weight from 100 and the result saturates at 0. It is not a calibrated risk
model. The risk level uses its own rule-of-thumb cut points and is not
derived from the score.
"""

from __future__ import annotations

from vulngate.constants.scoring import (
    MAX_SECURITY_SCORE,
    MAX_WEIGHTED_ISSUES,
    RISK_HIGH_MIN_HIGH_COUNT,
    RISK_MEDIUM_MIN_MEDIUM_COUNT,
    SEVERITY_WEIGHTS,
)
from vulngate.model import SeverityTally
from vulngate.types import RiskLevel, Severity


def weighted_issue_sum(tally: SeverityTally) -> int:
    """Return ``40*critical + 30*high + 20*medium + 10*low``."""
    return sum(weight * tally.count(severity) for severity, weight in SEVERITY_WEIGHTS.items())


def security_score(tally: SeverityTally) -> int:
    """Map a tally to a 0-100 score where 100 means no weighted issues."""
    penalty = weighted_issue_sum(tally) / MAX_WEIGHTED_ISSUES * MAX_SECURITY_SCORE
    score = max(0.0, MAX_SECURITY_SCORE - penalty)
    return min(MAX_SECURITY_SCORE, int(score + 0.5))


def risk_level(tally: SeverityTally) -> RiskLevel:
    """Classify a tally; the first matching rule wins."""
    if tally.count(Severity.CRITICAL) > 0:
        return "Critical"
    if tally.count(Severity.HIGH) >= RISK_HIGH_MIN_HIGH_COUNT:
        return "High"
    if tally.count(Severity.HIGH) > 0 or tally.count(Severity.MEDIUM) >= RISK_MEDIUM_MIN_MEDIUM_COUNT:
        return "Medium"
    return "Low"
