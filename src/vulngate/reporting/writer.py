"""Output writer for the gate report JSON artifact."""

from __future__ import annotations

from pathlib import Path

from vulngate.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from vulngate.io import write_json_atomic
from vulngate.model import GateReport


def write_gate_report(path: Path, report: GateReport) -> Path:
    """Write *report* as JSON to *path* atomically and return the path."""
    write_json_atomic(
        path=path,
        payload=report.to_dict(),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return path
