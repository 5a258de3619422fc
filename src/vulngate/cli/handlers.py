"""CLI subcommand handlers and gate-to-exit-code mapping."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from vulngate.config import VulngateConfig, load_config
from vulngate.constants.gate import GITHUB_OUTPUT_ENV
from vulngate.exceptions import ConfigError
from vulngate.io import append_output_variable
from vulngate.model import GateReport

logger = logging.getLogger(__name__)


def apply_threshold_overrides(config: VulngateConfig, args: argparse.Namespace) -> VulngateConfig:
    """Overlay CLI threshold and size flags onto a loaded config.

    Overrides go through the ``GateConfig`` constructor, so invalid values
    raise ``ConfigError`` just like invalid file values.
    """
    overrides = {
        name: value
        for name, value in (
            ("critical", args.max_critical),
            ("high", args.max_high),
            ("medium", args.max_medium),
            ("low", args.max_low),
        )
        if value is not None
    }
    if overrides:
        config = replace(config, thresholds=replace(config.thresholds, **overrides))
    if args.max_file_mb is not None:
        if args.max_file_mb <= 0:
            raise ConfigError("--max-file-mb must be a positive integer")
        config = replace(config, max_file_mb=args.max_file_mb)
    return config


def gate_exit_code(report: GateReport) -> int:
    """Return 0 when the gate passed and 1 when any severity exceeded its threshold."""
    return 0 if report.passed else 1


def write_github_output(passed: bool) -> Path | None:
    """Append ``passed=true|false`` to ``$GITHUB_OUTPUT`` when running in GitHub Actions."""
    target = os.environ.get(GITHUB_OUTPUT_ENV)
    if not target:
        return None
    path = Path(target)
    try:
        append_output_variable(path, "passed", "true" if passed else "false")
    except OSError as exc:
        logger.warning("Could not write %s: %s", GITHUB_OUTPUT_ENV, exc)
        return None
    return path


def handle_validate_config(args: argparse.Namespace) -> int:
    """Load and validate config, reporting errors without scanning."""
    try:
        load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
