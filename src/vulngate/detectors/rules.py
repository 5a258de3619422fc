"""Heuristic regex rules used when no external scanner is available."""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import urlparse

from vulngate.constants.detectors import (
    AWS_ACCESS_KEY_PATTERN,
    GENERIC_TOKEN_PATTERN,
    HARDCODED_SECRET_TYPE,
    HTTP_URL_PATTERN,
    INSECURE_RANDOM_PATTERNS,
    INSECURE_RANDOM_TYPE,
    INSECURE_TRANSPORT_TYPE,
    LOOPBACK_HOSTS,
    MISSING_VALIDATION_TYPE,
    REQUEST_INPUT_PATTERN,
    SECRET_ASSIGNMENT_PATTERN,
    SQL_INJECTION_PATTERNS,
    SQL_INJECTION_TYPE,
    VALIDATION_MARKERS,
    WEAK_CRYPTO_PATTERN,
    WEAK_CRYPTO_TYPE,
    XSS_PATTERNS,
    XSS_TYPE,
)
from vulngate.detectors.base import Detector, first_match
from vulngate.types import Severity


class HardcodedSecretDetector(Detector):
    """Detect credential literals, AWS access key ids and long opaque tokens."""

    rule_id = "HARDCODED_SECRET"
    finding_type = HARDCODED_SECRET_TYPE
    severity = Severity.HIGH
    description = "Hardcoded secret or credential found"
    recommendation = "Use environment variables or a secrets manager"

    def match(self, line: str) -> re.Match[str] | None:
        return first_match((SECRET_ASSIGNMENT_PATTERN, AWS_ACCESS_KEY_PATTERN, GENERIC_TOKEN_PATTERN), line)


class SqlInjectionDetector(Detector):
    """Detect SQL statements assembled by concatenation or interpolation."""

    rule_id = "SQL_INJECTION"
    finding_type = SQL_INJECTION_TYPE
    severity = Severity.CRITICAL
    description = "Potential SQL injection vulnerability"
    recommendation = "Use parameterized queries or prepared statements"

    def match(self, line: str) -> re.Match[str] | None:
        return first_match(SQL_INJECTION_PATTERNS, line)


class XssDetector(Detector):
    """Detect direct DOM and string-evaluation sinks."""

    rule_id = "XSS"
    finding_type = XSS_TYPE
    severity = Severity.HIGH
    description = "Potential XSS vulnerability"
    recommendation = "Sanitize and validate user input"

    def match(self, line: str) -> re.Match[str] | None:
        return first_match(XSS_PATTERNS, line)


class InsecureRandomDetector(Detector):
    """Detect non-cryptographic random sources."""

    rule_id = "INSECURE_RANDOM"
    finding_type = INSECURE_RANDOM_TYPE
    severity = Severity.MEDIUM
    description = "Insecure random number generation"
    recommendation = "Use a cryptographically secure generator such as crypto.randomBytes() or secrets"

    def match(self, line: str) -> re.Match[str] | None:
        return first_match(INSECURE_RANDOM_PATTERNS, line)


class MissingInputValidationDetector(Detector):
    """Detect request-derived values used without a validation marker on the same line."""

    rule_id = "MISSING_INPUT_VALIDATION"
    finding_type = MISSING_VALIDATION_TYPE
    severity = Severity.MEDIUM
    description = "Missing input validation"
    recommendation = "Add proper input validation and sanitization"

    def match(self, line: str) -> re.Match[str] | None:
        found = REQUEST_INPUT_PATTERN.search(line)
        if found is None:
            return None
        lowered = line.lower()
        if any(marker in lowered for marker in VALIDATION_MARKERS):
            return None
        return found


class InsecureTransportDetector(Detector):
    """Detect plain ``http://`` URLs that do not point at a loopback host."""

    rule_id = "INSECURE_TRANSPORT"
    finding_type = INSECURE_TRANSPORT_TYPE
    severity = Severity.MEDIUM
    description = "Insecure HTTP connection"
    recommendation = "Use HTTPS for all communications"

    def match(self, line: str) -> re.Match[str] | None:
        for found in HTTP_URL_PATTERN.finditer(line):
            if not _is_loopback_url(found.group(0)):
                return found
        return None


class WeakCryptoDetector(Detector):
    """Detect deprecated hash and cipher names."""

    rule_id = "WEAK_CRYPTO"
    finding_type = WEAK_CRYPTO_TYPE
    severity = Severity.HIGH
    description = "Weak or deprecated encryption method"
    recommendation = "Use strong algorithms such as SHA-256, AES-256 or RSA-2048+"

    def match(self, line: str) -> re.Match[str] | None:
        return WEAK_CRYPTO_PATTERN.search(line)


DETECTOR_CLASSES: tuple[type[Detector], ...] = (
    HardcodedSecretDetector,
    SqlInjectionDetector,
    XssDetector,
    InsecureRandomDetector,
    MissingInputValidationDetector,
    InsecureTransportDetector,
    WeakCryptoDetector,
)


def build_detectors(rule_ids: tuple[str, ...] | None = None) -> list[Detector]:
    """Instantiate detectors in their canonical order, optionally filtered by rule id."""
    if rule_ids is None:
        return [detector_cls() for detector_cls in DETECTOR_CLASSES]
    known = {detector_cls.rule_id for detector_cls in DETECTOR_CLASSES}
    unknown = sorted(set(rule_ids) - known)
    if unknown:
        raise ValueError(f"Unknown detector rule ids: {', '.join(unknown)}")
    return [detector_cls() for detector_cls in DETECTOR_CLASSES if detector_cls.rule_id in rule_ids]


def _is_loopback_url(url: str) -> bool:
    try:
        host = urlparse(url).hostname
    except ValueError:
        return False
    if not host:
        return False
    host = host.lower()
    if host in LOOPBACK_HOSTS:
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False
