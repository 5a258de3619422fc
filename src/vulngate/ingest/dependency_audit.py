"""Ingestion of dependency-audit documents (npm audit and Snyk JSON)."""

from __future__ import annotations

from vulngate.constants.ingest import VULNERABLE_DEPENDENCY_TYPE
from vulngate.ingest.common import as_text, build_finding
from vulngate.model import Finding, IngestResult
from vulngate.types import Severity
from vulngate.utils import make_finding_id

DEPENDENCY_AUDIT_ORIGIN = "dependency-audit"


def ingest_dependency_audit(document: object) -> IngestResult:
    """Normalize a dependency-audit document into one finding per vulnerable dependency.

    npm audit reports carry a ``vulnerabilities`` mapping keyed by package
    name. Snyk reports carry a ``vulnerabilities`` list of advisories.
    """
    if not isinstance(document, dict):
        return IngestResult(errors=("Dependency audit report must be a JSON object",))

    vulnerabilities = document.get("vulnerabilities")
    if isinstance(vulnerabilities, dict):
        findings = [
            _npm_finding(str(name), value, index)
            for index, (name, value) in enumerate(vulnerabilities.items())
            if isinstance(value, dict)
        ]
    elif isinstance(vulnerabilities, list):
        findings = [
            _snyk_finding(entry, index) for index, entry in enumerate(vulnerabilities) if isinstance(entry, dict)
        ]
    else:
        return IngestResult(errors=("Dependency audit report has no vulnerabilities collection",))

    return IngestResult(findings=tuple(findings))


def _npm_finding(name: str, value: dict[str, object], index: int) -> Finding:
    package = as_text(value.get("name"), name)
    version_range = as_text(value.get("range"))
    advisories = _advisory_titles(value.get("via"))

    description = f"{package} {version_range}".strip()
    if advisories:
        description = f"{description}: {'; '.join(advisories)}"

    return Finding(
        id=make_finding_id(DEPENDENCY_AUDIT_ORIGIN, package, version_range, index),
        type=VULNERABLE_DEPENDENCY_TYPE,
        severity=Severity.parse(value.get("severity")),
        source_file="",
        description=description,
        origin=DEPENDENCY_AUDIT_ORIGIN,
        recommendation=_npm_fix_hint(package, value.get("fixAvailable")),
    )


def _advisory_titles(via: object) -> list[str]:
    """Collect advisory titles from npm's ``via`` list; bare strings name transitive causes."""
    if not isinstance(via, list):
        return []
    titles: list[str] = []
    for item in via:
        if isinstance(item, dict):
            title = as_text(item.get("title"))
        else:
            title = as_text(item)
            title = f"via {title}" if title else ""
        if title and title not in titles:
            titles.append(title)
    return titles


def _npm_fix_hint(package: str, fix_available: object) -> str | None:
    if fix_available is True:
        return f"Run `npm audit fix` to upgrade {package}"
    if isinstance(fix_available, dict):
        fix_name = as_text(fix_available.get("name"), package)
        fix_version = as_text(fix_available.get("version"))
        if fix_version:
            return f"Upgrade {fix_name} to {fix_version}"
        return f"Upgrade {fix_name}"
    return None


def _snyk_finding(entry: dict[str, object], index: int) -> Finding:
    package = as_text(entry.get("packageName"), as_text(entry.get("moduleName")))
    version = as_text(entry.get("version"))
    title = as_text(entry.get("title"))
    advisory_id = as_text(entry.get("id"))
    description = " ".join(part for part in (package, version) if part)
    if title:
        description = f"{description}: {title}" if description else title
    if advisory_id:
        description = f"[{advisory_id}] {description}".rstrip()

    fixed_in = entry.get("fixedIn")
    recommendation = None
    if isinstance(fixed_in, list) and fixed_in:
        versions = ", ".join(str(item) for item in fixed_in)
        recommendation = f"Upgrade {package or 'the dependency'} to {versions}"

    normalized = {
        "type": VULNERABLE_DEPENDENCY_TYPE,
        "severity": entry.get("severity"),
        "description": description,
        "recommendation": recommendation,
    }
    return build_finding(
        normalized,
        origin=DEPENDENCY_AUDIT_ORIGIN,
        index=index,
        default_type=VULNERABLE_DEPENDENCY_TYPE,
    )
