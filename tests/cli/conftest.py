"""Shared fixtures for CLI tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _no_github_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CLI runs from appending to a real ``$GITHUB_OUTPUT`` file."""
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
