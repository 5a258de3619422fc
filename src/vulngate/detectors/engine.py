"""Line-by-line pattern detection over source text."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from vulngate.detectors.base import Detector
from vulngate.detectors.rules import build_detectors
from vulngate.model import Finding

logger = logging.getLogger(__name__)


def detect(text: str, file_path: str, detectors: Sequence[Detector] | None = None) -> list[Finding]:
    """Scan *text* and return one finding per (line, rule) that triggers.

    Lines are 1-indexed. Non-string input yields no findings.
    """
    if not isinstance(text, str):
        return []
    active = list(detectors) if detectors is not None else build_detectors()

    findings: list[Finding] = []
    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.rstrip("\r")
        if not line.strip():
            continue
        for detector in active:
            found = detector.match(line)
            if found is None:
                continue
            findings.append(
                detector.to_finding(
                    file_path=file_path,
                    line=line_number,
                    column=found.start() + 1,
                )
            )
    return findings


def scan_file(
    path: Path,
    detectors: Sequence[Detector] | None = None,
    *,
    display_path: str | None = None,
) -> tuple[list[Finding], str | None]:
    """Detect findings in one file.

    Returns the findings and an error message. Unreadable or non-UTF-8 files
    produce no findings; the message is left for the caller to surface.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return [], f"Could not read {display_path or path}: {exc}"
    return detect(text, display_path or str(path), detectors), None
