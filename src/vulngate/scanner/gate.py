"""Security gate evaluation against per-severity thresholds."""

from __future__ import annotations

from vulngate.constants.gate import GATED_SEVERITIES
from vulngate.model import GateConfig, GateVerdict, SeverityCheck, SeverityTally


def evaluate_gate(tally: SeverityTally, config: GateConfig) -> GateVerdict:
    """Compare each gated severity count against its threshold.

    A count equal to its threshold passes. ``info`` findings are never gated.
    """
    checks: list[SeverityCheck] = []
    for severity in GATED_SEVERITIES:
        count = tally.count(severity)
        threshold = config.threshold(severity)
        assert threshold is not None
        checks.append(
            SeverityCheck(
                severity=severity,
                count=count,
                threshold=threshold,
                passed=count <= threshold,
            )
        )
    return GateVerdict(checks=tuple(checks))
