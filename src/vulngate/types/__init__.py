"""Shared type aliases for Vulngate."""

from .common import (
    FindingOrigin,
    JsonObject,
    JsonScalar,
    JsonValue,
    ReportKind,
    RiskLevel,
    Severity,
)

__all__ = [
    "FindingOrigin",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "ReportKind",
    "RiskLevel",
    "Severity",
]
