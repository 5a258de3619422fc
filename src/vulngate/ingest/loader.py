"""Report-kind dispatch and best-effort report loading."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from vulngate.constants.ingest import (
    AI_ANALYSIS_KIND,
    AI_FILE_ANALYSIS_KEYS,
    DEPENDENCY_AUDIT_KIND,
    LINT_KIND,
    REPORT_KIND_FILENAME_HINTS,
    VALID_REPORT_KINDS,
)
from vulngate.ingest.ai_analysis import ingest_ai_analysis
from vulngate.ingest.dependency_audit import ingest_dependency_audit
from vulngate.ingest.lint import ingest_lint
from vulngate.io import load_json_file
from vulngate.model import IngestResult
from vulngate.types import ReportKind

logger = logging.getLogger(__name__)

_INGESTORS: dict[str, Callable[[object], IngestResult]] = {
    AI_ANALYSIS_KIND: ingest_ai_analysis,
    DEPENDENCY_AUDIT_KIND: ingest_dependency_audit,
    LINT_KIND: ingest_lint,
}


def ingest_document(kind: ReportKind, document: object) -> IngestResult:
    """Ingest a parsed report document of the given kind.

    Never raises for malformed documents: a shape that does not match yields
    an empty result whose ``errors`` explain what was skipped.
    """
    ingestor = _INGESTORS.get(kind)
    if ingestor is None:
        return IngestResult(errors=(f"Unknown report kind {kind!r}",))
    try:
        return ingestor(document)
    except (TypeError, ValueError, AttributeError, KeyError, OverflowError, RecursionError) as exc:
        logger.warning("Ignoring malformed %s report: %s", kind, exc)
        return IngestResult(errors=(f"Malformed {kind} report: {exc}",))


def detect_report_kind(path: Path | None, document: object) -> ReportKind | None:
    """Infer the report kind from the file name, falling back to the document shape."""
    if path is not None:
        name = path.name.lower()
        for fragment, kind in REPORT_KIND_FILENAME_HINTS:
            if fragment in name:
                return kind

    if isinstance(document, list):
        return LINT_KIND
    if not isinstance(document, dict):
        return None
    if any(key in document for key in (*AI_FILE_ANALYSIS_KEYS, "overallAnalysis")):
        return AI_ANALYSIS_KIND
    vulnerabilities = document.get("vulnerabilities")
    if isinstance(vulnerabilities, dict):
        return DEPENDENCY_AUDIT_KIND
    if isinstance(vulnerabilities, list):
        if any(isinstance(entry, dict) and "packageName" in entry for entry in vulnerabilities):
            return DEPENDENCY_AUDIT_KIND
        return AI_ANALYSIS_KIND
    return None


def load_report(path: Path, kind: ReportKind | None = None) -> IngestResult:
    """Read and ingest one report file.

    Unreadable files, invalid JSON and unrecognised shapes produce an empty
    result carrying an error message rather than an exception.
    """
    if kind is not None and kind not in VALID_REPORT_KINDS:
        return IngestResult(errors=(f"Unknown report kind {kind!r} for {path}",))
    try:
        document = load_json_file(path)
    except (OSError, UnicodeDecodeError, ValueError, RecursionError) as exc:
        logger.warning("Could not load report %s: %s", path, exc)
        return IngestResult(errors=(f"Could not load report {path}: {exc}",))

    resolved_kind = kind or detect_report_kind(path, document)
    if resolved_kind is None:
        return IngestResult(errors=(f"Could not determine report kind for {path}",))

    result = ingest_document(resolved_kind, document)
    logger.debug("Ingested %d findings from %s (%s)", len(result.findings), path, resolved_kind)
    return result
