"""Cross-module type aliases and the severity taxonomy."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, TypeAlias

RiskLevel: TypeAlias = Literal["Critical", "High", "Medium", "Low"]
FindingOrigin: TypeAlias = Literal["pattern-detector", "ai-analysis", "dependency-audit", "lint"]
ReportKind: TypeAlias = Literal["ai-analysis", "dependency-audit", "lint"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

# Scanner-specific spellings folded onto the canonical classes.
_SEVERITY_ALIASES: dict[str, str] = {"moderate": "medium", "informational": "info"}


class Severity(StrEnum):
    """Canonical severity classes, highest first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Numeric rank where a larger value is more severe."""
        match self:
            case Severity.CRITICAL:
                return 4
            case Severity.HIGH:
                return 3
            case Severity.MEDIUM:
                return 2
            case Severity.LOW:
                return 1
            case Severity.INFO:
                return 0

    @classmethod
    def parse(cls, raw: object) -> Severity:
        """Normalize a raw severity value; unknown or missing values become ``low``."""
        if isinstance(raw, Severity):
            return raw
        if not isinstance(raw, str):
            return cls.LOW
        try:
            normalized = raw.strip().lower()
            return cls(_SEVERITY_ALIASES.get(normalized, normalized))
        except ValueError:
            return cls.LOW
