"""End-to-end gate orchestration for Vulngate.

``run_gate`` is the primary entry point: it scans a source tree with the
pattern detector, ingests scanner reports, and folds everything into one
``GateReport``. ``build_gate_report`` is the pure assembly step.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from pathlib import Path

from vulngate.config import VulngateConfig
from vulngate.constants.reporting import SCHEMA_VERSION
from vulngate.detectors import DETECTOR_CLASSES, build_detectors, scan_file
from vulngate.ingest import load_report
from vulngate.model import Finding, GateConfig, GateReport, SeverityTally
from vulngate.scanner.aggregate import aggregate, origin_counts, sorted_top_findings, type_counts
from vulngate.scanner.discovery import discover_source_files, relative_display_path
from vulngate.scanner.gate import evaluate_gate
from vulngate.scanner.recommendations import extract_recommendations
from vulngate.scanner.score import risk_level, security_score
from vulngate.types import ReportKind

logger = logging.getLogger(__name__)


def build_gate_report(
    findings: Sequence[Finding],
    *,
    gate_config: GateConfig,
    report_recommendations: Iterable[str] = (),
    reported_counts: SeverityTally | None = None,
    compliance: Mapping[str, str] | None = None,
    scanned_files: int = 0,
    warnings: Sequence[str] = (),
) -> GateReport:
    """Assemble tally, score, risk level, verdict and recommendations.

    *reported_counts* are summary counts a scanner declared without listing
    the individual findings; they are added to the tally of *findings*.
    Repeated finding ids are suffixed so every id in the report is unique.
    """
    findings = unique_finding_ids(findings)
    tally = aggregate(findings)
    if reported_counts is not None:
        tally = tally + reported_counts

    return GateReport(
        schema_version=SCHEMA_VERSION,
        tally=tally,
        score=security_score(tally),
        risk_level=risk_level(tally),
        verdict=evaluate_gate(tally, gate_config),
        recommendations=tuple(extract_recommendations(findings, report_recommendations)),
        counts_by_type=type_counts(findings),
        counts_by_origin=origin_counts(findings),
        top_findings=tuple(sorted_top_findings(findings)),
        findings=tuple(findings),
        compliance=dict(compliance or {}),
        scanned_files=scanned_files,
        warnings=tuple(warnings),
    )


def unique_finding_ids(findings: Sequence[Finding]) -> list[Finding]:
    """Return *findings* with repeated ids renamed to ``<id>-2``, ``<id>-3`` and so on.

    The first occurrence keeps its id. Scanners often restart numbering per
    file, so supplied ids such as ``VULN-001`` can repeat within one run.
    """
    taken = {finding.id for finding in findings}
    seen: set[str] = set()
    unique: list[Finding] = []
    for finding in findings:
        if finding.id not in seen:
            seen.add(finding.id)
            unique.append(finding)
            continue
        suffix = 2
        while f"{finding.id}-{suffix}" in taken:
            suffix += 1
        new_id = f"{finding.id}-{suffix}"
        taken.add(new_id)
        seen.add(new_id)
        unique.append(replace(finding, id=new_id))
    return unique

def run_gate(
    *,
    root: Path | None = None,
    report_paths: Sequence[Path] = (),
    config: VulngateConfig | None = None,
    report_kind: ReportKind | None = None,
) -> GateReport:
    """Scan *root* and ingest *report_paths*, returning the gate report.

    Unreadable files and malformed reports never abort the run; they are
    collected as warnings on the returned report.
    """
    config = config or VulngateConfig()
    findings: list[Finding] = []
    warnings: list[str] = []
    report_recommendations: list[str] = []
    reported_counts = SeverityTally()
    compliance: dict[str, str] = {}
    scanned_files = 0

    if root is not None:
        resolved_root = root.resolve()
        disabled = set(config.detectors.disabled)
        detectors = build_detectors(
            tuple(detector_cls.rule_id for detector_cls in DETECTOR_CLASSES if detector_cls.rule_id not in disabled)
        )
        source_files = discover_source_files(
            resolved_root,
            extensions=config.extensions,
            exclude_dirs=config.exclude_dirs,
            max_file_mb=config.max_file_mb,
        )
        logger.info("Scanning %d source files under %s", len(source_files), resolved_root)
        for path in source_files:
            file_findings, error = scan_file(
                path,
                detectors,
                display_path=relative_display_path(path, resolved_root),
            )
            if error is not None:
                logger.warning("%s", error)
                warnings.append(error)
                continue
            scanned_files += 1
            findings.extend(file_findings)

    for report_path in report_paths:
        result = load_report(report_path, report_kind)
        findings.extend(result.findings)
        report_recommendations.extend(result.recommendations)
        reported_counts = reported_counts + result.reported_counts
        compliance.update(result.compliance)
        for error in result.errors:
            logger.warning("%s", error)
        warnings.extend(result.errors)
        logger.info("Ingested %d findings from %s", len(result.findings), report_path)

    report = build_gate_report(
        findings,
        gate_config=config.thresholds,
        report_recommendations=report_recommendations,
        reported_counts=reported_counts,
        compliance=compliance,
        scanned_files=scanned_files,
        warnings=warnings,
    )
    logger.info(
        "Gate %s: %d findings, score %d, risk %s",
        "passed" if report.passed else "failed",
        report.tally.total,
        report.score,
        report.risk_level,
    )
    return report
