"""Coercion helpers shared by the report ingestors."""

from __future__ import annotations

import json
import math
import re

from vulngate.model import Finding
from vulngate.types import FindingOrigin, Severity
from vulngate.utils import make_finding_id

_EMBEDDED_OBJECT_PATTERN: re.Pattern[str] = re.compile(r"\{[\s\S]*\}")


def as_text(value: object, default: str = "") -> str:
    """Return *value* stripped when it is a non-empty string, else *default*."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def as_positive_int(value: object) -> int | None:
    """Return a positive integer position, or ``None`` when absent or invalid."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdecimal():
        try:
            parsed = int(value.strip())
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None


def as_count(value: object) -> int:
    """Return a non-negative count, treating anything unusable as zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(0, int(value))


def as_string_list(value: object) -> list[str]:
    """Keep the non-blank string items of a list; anything else yields ``[]``."""
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def parse_embedded_json(text: str) -> object:
    """Parse JSON that may be wrapped in surrounding prose.

    The whole string is tried first, then the outermost ``{...}`` span.
    Raises ``ValueError`` when neither parses, including when the nesting is
    too deep for the decoder.
    """
    try:
        return json.loads(text)
    except ValueError:
        pass
    except RecursionError as exc:
        raise ValueError("JSON nesting too deep") from exc
    embedded = _EMBEDDED_OBJECT_PATTERN.search(text)
    if embedded is None:
        raise ValueError("no JSON object found")
    try:
        return json.loads(embedded.group(0))
    except RecursionError as exc:
        raise ValueError("JSON nesting too deep") from exc


def build_finding(
    entry: dict[str, object],
    *,
    origin: FindingOrigin,
    index: int,
    source_file: str = "",
    default_type: str,
    severity: Severity | None = None,
) -> Finding:
    """Normalize a scanner entry into a ``Finding``.

    *severity* overrides the entry's own ``severity`` field when given.
    """
    finding_type = as_text(entry.get("type"), default_type)
    file_path = as_text(entry.get("file"), source_file)
    line = as_positive_int(entry.get("line"))
    column = as_positive_int(entry.get("column"))
    description = as_text(entry.get("description"))
    recommendation = as_text(entry.get("recommendation")) or None

    raw_id = entry.get("id")
    if isinstance(raw_id, (str, int)) and not isinstance(raw_id, bool) and str(raw_id).strip():
        finding_id = str(raw_id).strip()
    else:
        finding_id = make_finding_id(origin, finding_type, file_path, line, column, description, index)

    return Finding(
        id=finding_id,
        type=finding_type,
        severity=severity if severity is not None else Severity.parse(entry.get("severity")),
        source_file=file_path,
        description=description,
        origin=origin,
        line=line,
        column=column,
        recommendation=recommendation,
    )
