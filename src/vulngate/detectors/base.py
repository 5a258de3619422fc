"""Detector interfaces for line-local pattern rules."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from vulngate.model import Finding
from vulngate.types import Severity
from vulngate.utils import make_finding_id

_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")

PATTERN_DETECTOR_ORIGIN = "pattern-detector"


class Detector(ABC):
    """Abstract base class for detector implementations.

    A detector inspects one line at a time and reports at most one match per
    line. Subclasses declare the finding metadata as class attributes.
    """

    rule_id: ClassVar[str]
    finding_type: ClassVar[str]
    severity: ClassVar[Severity]
    description: ClassVar[str]
    recommendation: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate detector subclasses define a valid UPPER_SNAKE_CASE `rule_id`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        rule_id = getattr(cls, "rule_id", None)
        if not isinstance(rule_id, str) or not rule_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `rule_id`")
        if not _RULE_ID_PATTERN.match(rule_id):
            raise TypeError(f"{cls.__name__}.rule_id must be UPPER_SNAKE_CASE (got {rule_id!r})")
        if not isinstance(getattr(cls, "severity", None), Severity):
            raise TypeError(f"{cls.__name__} must define `severity` as a Severity member")

    @abstractmethod
    def match(self, line: str) -> re.Match[str] | None:
        """Return the triggering match on *line*, or ``None``."""

    def to_finding(self, *, file_path: str, line: int, column: int) -> Finding:
        """Build the finding emitted for a match at *line*/*column*."""
        return Finding(
            id=make_finding_id(PATTERN_DETECTOR_ORIGIN, self.rule_id, file_path, line, column),
            type=self.finding_type,
            severity=self.severity,
            source_file=file_path,
            description=self.description,
            origin=PATTERN_DETECTOR_ORIGIN,
            line=line,
            column=column,
            recommendation=self.recommendation,
        )


def first_match(patterns: tuple[re.Pattern[str], ...], line: str) -> re.Match[str] | None:
    """Return the earliest match on *line* across *patterns*."""
    best: re.Match[str] | None = None
    for pattern in patterns:
        found = pattern.search(line)
        if found is not None and (best is None or found.start() < best.start()):
            best = found
    return best
