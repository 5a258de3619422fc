"""Detector patterns, finding types and remediation text."""

from __future__ import annotations

import re
from re import Pattern

SECRET_ASSIGNMENT_PATTERN: Pattern[str] = re.compile(
    # Whole word or snake_case suffix in any case, or a camelCase suffix such as apiKey.
    r"(?:(?<![A-Za-z0-9])(?i:password|secret|key|token|api_key|access_key)"
    r"|(?<=[a-z0-9])(?:Password|Secret|Key|Token))"
    r"\s*=\s*['\"][^'\"]+['\"]"
)
AWS_ACCESS_KEY_PATTERN: Pattern[str] = re.compile(r"AKIA[0-9A-Z]{16}")
GENERIC_TOKEN_PATTERN: Pattern[str] = re.compile(r"(?<![A-Za-z0-9+/])[A-Za-z0-9+/]{40,}")

_SQL_VERB: str = r"\b(?:SELECT|INSERT|UPDATE|DELETE)\b"
SQL_INJECTION_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(_SQL_VERB + r".*(?:['\"`]\s*\+|\+\s*['\"`])", re.IGNORECASE),
    re.compile(_SQL_VERB + r".*\$\{[^}]*\}", re.IGNORECASE),
    re.compile(r"\$\{[^}]*\}.*" + _SQL_VERB, re.IGNORECASE),
    re.compile(_SQL_VERB + r".*['\"]\s*\.format\(", re.IGNORECASE),
    re.compile(_SQL_VERB + r".*['\"]\s*%\s*[\w(]", re.IGNORECASE),
    re.compile(r"\bf['\"][^'\"]*" + _SQL_VERB + r"[^'\"]*\{", re.IGNORECASE),
)

XSS_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(r"\binnerHTML\s*=(?!=)"),
    re.compile(r"\bdocument\.write(?:ln)?\s*\("),
    re.compile(r"\beval\s*\("),
    re.compile(r"\bset(?:Timeout|Interval)\s*\(\s*['\"`]"),
)

INSECURE_RANDOM_PATTERNS: tuple[Pattern[str], ...] = (
    re.compile(r"\bMath\.random\b"),
    re.compile(r"\brandom\.(?:random|randint|randrange|choice|choices|getrandbits|sample|uniform)\s*\("),
    re.compile(r"\bnew\s+(?:java\.util\.)?Random\s*\("),
    re.compile(r"(?<![\w.])s?rand\s*\(\s*\)"),
)

REQUEST_INPUT_PATTERN: Pattern[str] = re.compile(
    r"\breq\.(?:body|query|params)\.|\brequest\.(?:args|form|json|values|data|GET|POST)\b"
)
VALIDATION_MARKERS: tuple[str, ...] = ("validat", "sanitiz", "sanitis")

HTTP_URL_PATTERN: Pattern[str] = re.compile(r"http://[^\s'\"<>`)]+", re.IGNORECASE)
LOOPBACK_HOSTS: frozenset[str] = frozenset({"localhost", "0.0.0.0", "::1"})

WEAK_CRYPTO_PATTERN: Pattern[str] = re.compile(
    r"(?<![A-Za-z0-9])(?:MD5|SHA-?1|3?DES|RC4)(?![A-Za-z0-9])",
    re.IGNORECASE,
)

HARDCODED_SECRET_TYPE: str = "Hardcoded Secret"
SQL_INJECTION_TYPE: str = "SQL Injection"
XSS_TYPE: str = "Cross-Site Scripting (XSS)"
INSECURE_RANDOM_TYPE: str = "Insecure Random"
MISSING_VALIDATION_TYPE: str = "Missing Input Validation"
INSECURE_TRANSPORT_TYPE: str = "Insecure HTTP"
WEAK_CRYPTO_TYPE: str = "Weak Encryption"
