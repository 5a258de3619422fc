"""Report ingestion for heterogeneous scanner outputs."""

from .ai_analysis import ingest_ai_analysis
from .dependency_audit import ingest_dependency_audit
from .lint import ingest_lint
from .loader import detect_report_kind, ingest_document, load_report

__all__ = [
    "detect_report_kind",
    "ingest_ai_analysis",
    "ingest_dependency_audit",
    "ingest_document",
    "ingest_lint",
    "load_report",
]
