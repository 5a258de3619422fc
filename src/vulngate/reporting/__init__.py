"""Reporting package for Vulngate outputs."""

from __future__ import annotations

from typing import Any

__all__ = ["StdoutReporter", "write_gate_report"]


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name == "write_gate_report":
        from .writer import write_gate_report

        return write_gate_report
    if name == "StdoutReporter":
        from .stdout import StdoutReporter

        return StdoutReporter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
