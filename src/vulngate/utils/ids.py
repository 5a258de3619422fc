"""Stable identifier helpers for findings that arrive without one."""

from __future__ import annotations

import hashlib

from vulngate.constants.ids import FINDING_ID_HEX_LENGTH


def make_finding_id(*parts: object) -> str:
    """Return a short deterministic SHA-256 digest of the identity *parts*."""
    identity = "|".join("" if part is None else str(part) for part in parts)
    return hashlib.sha256(identity.encode("utf-8")).hexdigest()[:FINDING_ID_HEX_LENGTH]
