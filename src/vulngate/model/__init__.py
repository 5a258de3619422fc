"""Core data models for Vulngate."""

from .entities import (
    Finding,
    GateConfig,
    GateReport,
    GateVerdict,
    IngestResult,
    SeverityCheck,
    SeverityTally,
)

__all__ = [
    "Finding",
    "GateConfig",
    "GateReport",
    "GateVerdict",
    "IngestResult",
    "SeverityCheck",
    "SeverityTally",
]
