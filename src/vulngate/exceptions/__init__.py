"""Shared exception hierarchy for Vulngate."""

from __future__ import annotations

from .base import VulngateError
from .config import ConfigError

__all__ = [
    "ConfigError",
    "VulngateError",
]
