"""Human-readable stdout reporter for gate results."""

from __future__ import annotations

from vulngate.constants.branding import ASCII_LOGO_LINES, GATE_SUMMARY_TITLE
from vulngate.constants.reporting import (
    ANSI_BOLD,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    FAIL_MARK,
    PASS_MARK,
    SEVERITY_COLORS,
    STDOUT_RECOMMENDATIONS_LIMIT,
)
from vulngate.model import Finding, GateReport
from vulngate.types import RiskLevel, Severity


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_score(score: int) -> str:
    # Higher is safer here.
    if score >= 70:
        return _colorize(str(score), ANSI_GREEN)
    if score >= 40:
        return _colorize(str(score), ANSI_YELLOW)
    return _colorize(str(score), ANSI_RED)


def _color_risk(level: RiskLevel) -> str:
    match level:
        case "Critical" | "High":
            return _colorize(level, ANSI_RED)
        case "Medium":
            return _colorize(level, ANSI_YELLOW)
        case _:
            return _colorize(level, ANSI_GREEN)


class StdoutReporter:
    """Formats a gate report as terminal output."""

    def __init__(self, report: GateReport, *, color: bool = True, verbose: bool = False) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [
            self._render_header(),
            self._render_gate_table(),
            self._render_top_findings(),
            self._render_recommendations(),
            self._render_warnings(),
        ]
        return "\n".join(section for section in sections if section)

    def _mark(self, passed: bool) -> str:
        mark = PASS_MARK if passed else FAIL_MARK
        if not self._color:
            return mark
        return _colorize(mark, ANSI_GREEN if passed else ANSI_RED)

    def _severity(self, severity: Severity) -> str:
        if not self._color:
            return severity.value
        return _colorize(severity.value, SEVERITY_COLORS[severity])

    def _render_header(self) -> str:
        r = self._report
        sep = "  " + "─" * 38
        title = _colorize(GATE_SUMMARY_TITLE, ANSI_BOLD) if self._color else GATE_SUMMARY_TITLE
        score = _color_score(r.score) if self._color else str(r.score)
        risk = _color_risk(r.risk_level) if self._color else r.risk_level
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {title}",
            sep,
            "",
            f"  Score       {score}/100",
            f"  Risk level  {risk}",
            f"  Findings    {r.tally.total}",
        ]
        if r.scanned_files:
            lines.append(f"  Files       {r.scanned_files} scanned")
        if self._verbose and r.counts_by_origin:
            origins = ", ".join(f"{origin}={count}" for origin, count in r.counts_by_origin.items())
            lines.append(f"  Sources     {origins}")
        lines.append(f"  Verdict     {self._mark(r.passed)}")
        lines.append("")
        return "\n".join(lines)

    def _render_gate_table(self) -> str:
        r = self._report
        lines = ["  Severity    Count  Max   Result"]
        for check in r.verdict.checks:
            label = f"{check.severity.value:<10}"
            if self._color:
                label = _colorize(label, SEVERITY_COLORS[check.severity])
            lines.append(f"  {label}  {check.count:>5}  {check.threshold:>4}  {self._mark(check.passed)}")
        info_label = f"{Severity.INFO.value:<10}"
        if self._color:
            info_label = _colorize(info_label, SEVERITY_COLORS[Severity.INFO])
        lines.append(f"  {info_label}  {r.tally.info:>5}     -  -")
        lines.append("")
        return "\n".join(lines)

    def _render_top_findings(self) -> str:
        findings = self._report.findings if self._verbose else self._report.top_findings
        if not findings:
            return ""
        title = "  Findings" if self._verbose else "  Top findings"
        lines = [title]
        lines.extend(f"  - {self._format_finding(finding)}" for finding in findings)
        lines.append("")
        return "\n".join(lines)

    def _format_finding(self, finding: Finding) -> str:
        location = finding.source_file
        if location and finding.line is not None:
            location = f"{location}:{finding.line}"
        text = f"[{self._severity(finding.severity)}] {finding.type}"
        if location:
            text = f"{text} at {location}"
        if finding.description:
            text = f"{text}: {finding.description}"
        return text

    def _render_recommendations(self) -> str:
        recommendations = self._report.recommendations
        if not recommendations:
            return ""
        shown = recommendations if self._verbose else recommendations[:STDOUT_RECOMMENDATIONS_LIMIT]
        lines = ["  Recommendations"]
        lines.extend(f"  {index}. {text}" for index, text in enumerate(shown, start=1))
        hidden = len(recommendations) - len(shown)
        if hidden:
            lines.append(f"  ... and {hidden} more")
        lines.append("")
        return "\n".join(lines)

    def _render_warnings(self) -> str:
        if not self._report.warnings:
            return ""
        lines = ["  Warnings"]
        lines.extend(f"  ! {warning}" for warning in self._report.warnings)
        lines.append("")
        return "\n".join(lines)
