"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "VULNGATE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ VULNGATE",
    "     // security findings gate",
)
GATE_SUMMARY_TITLE: str = "Security gate summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} security gate"))
