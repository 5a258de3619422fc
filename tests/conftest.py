"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from vulngate.model import Finding
from vulngate.types import FindingOrigin, Severity


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture repository path."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture(scope="session")
def reports_root(fixtures_root: Path) -> Path:
    """Return the directory holding sample scanner reports."""
    return fixtures_root / "reports"


def _make_finding(
    fid: str = "f-001",
    *,
    severity: Severity = Severity.HIGH,
    finding_type: str = "Hardcoded Secret",
    origin: FindingOrigin = "pattern-detector",
    source_file: str = "src/app.js",
    line: int | None = 1,
    recommendation: str | None = None,
) -> Finding:
    """Create a minimal Finding for testing."""
    return Finding(
        id=fid,
        type=finding_type,
        severity=severity,
        source_file=source_file,
        description=f"Description for {fid}",
        origin=origin,
        line=line,
        column=1 if line is not None else None,
        recommendation=recommendation,
    )


@pytest.fixture()
def make_finding() -> Callable[..., Finding]:
    """Return a factory for minimal findings."""
    return _make_finding
