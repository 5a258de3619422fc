"""Aggregation, scoring, gating and orchestration."""

from __future__ import annotations

from typing import Any

__all__ = ["build_gate_report", "run_gate"]


def __getattr__(name: str) -> Any:
    """Lazily expose pipeline APIs to avoid import cycles at package import time."""
    if name in __all__:
        from . import orchestrator

        return getattr(orchestrator, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
