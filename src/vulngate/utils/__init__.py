"""Shared utility helpers."""

from __future__ import annotations

from .ids import make_finding_id

__all__ = ["make_finding_id"]
