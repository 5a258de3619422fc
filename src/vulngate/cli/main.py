"""CLI entrypoint for the Vulngate security gate."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from vulngate import __version__
from vulngate.cli.handlers import (
    apply_threshold_overrides,
    gate_exit_code,
    handle_validate_config,
    write_github_output,
)
from vulngate.config import load_config
from vulngate.constants.branding import CLI_DESCRIPTION
from vulngate.constants.ingest import VALID_REPORT_KINDS
from vulngate.constants.reporting import DEFAULT_REPORT_FILENAME
from vulngate.exceptions import ConfigError, VulngateError
from vulngate.reporting import StdoutReporter, write_gate_report
from vulngate.scanner import run_gate


def _add_gate_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument(
        "--report-kind",
        choices=sorted(VALID_REPORT_KINDS),
        default=None,
        help="Force the kind of every --report file instead of detecting it",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help=f"Write the JSON gate report to this file, or to {DEFAULT_REPORT_FILENAME} inside this directory",
    )
    parser.add_argument("--max-critical", type=int, help="Maximum allowed critical findings")
    parser.add_argument("--max-high", type=int, help="Maximum allowed high findings")
    parser.add_argument("--max-medium", type=int, help="Maximum allowed medium findings")
    parser.add_argument("--max-low", type=int, help="Maximum allowed low findings")
    parser.add_argument("--max-file-mb", type=int, help="Skip source files larger than this size")
    parser.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show every finding and debug logs")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="vulngate",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan a source tree and gate on the combined findings")
    scan.add_argument("-r", "--root", type=Path, required=True, help="Source tree root path")
    scan.add_argument(
        "--report",
        type=Path,
        action="append",
        default=[],
        help="Scanner report to ingest alongside the source scan (repeat for multiple files)",
    )
    _add_gate_options(scan)

    gate = subparsers.add_parser("gate", help="Gate on existing scanner reports without scanning source")
    gate.add_argument(
        "--report",
        type=Path,
        action="append",
        required=True,
        help="Scanner report to ingest (repeat for multiple files)",
    )
    _add_gate_options(gate)

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding vulngate.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    if args.command not in {"scan", "gate"}:
        parser.error(f"Unsupported command: {args.command}")

    root: Path | None = getattr(args, "root", None)
    if root is not None and not root.is_dir():
        print(f"Configuration error: root directory does not exist: {root}", file=sys.stderr)
        return 2

    try:
        config = apply_threshold_overrides(load_config(root or Path.cwd(), args.config), args)
        report = run_gate(
            root=root,
            report_paths=tuple(args.report),
            config=config,
            report_kind=args.report_kind,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except VulngateError as exc:
        print(f"Scanner error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        output = args.output / DEFAULT_REPORT_FILENAME if args.output.is_dir() else args.output
        try:
            write_gate_report(output, report)
        except OSError as exc:
            print(f"Scanner error: could not write {output}: {exc}", file=sys.stderr)
            return 1

    write_github_output(report.passed)

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(report, color=use_color, verbose=args.verbose)
        print(reporter.render())

    return gate_exit_code(report)


if __name__ == "__main__":
    raise SystemExit(main())
