"""Entry point for the hook bundler CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

logger = logging.getLogger(__name__)


def _write_report(path: Path, payload: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload + "\n", encoding="utf-8")
    logger.debug(f"Report written to {path}")


def run_build(args: argparse.Namespace) -> int:
    """Bundle and copy the configured hooks into the output directory.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code (0 for success, 1 for any unrecovered failure).
    """
    from hook_bundler.config import get_settings
    from hook_bundler.core.errors import BuildAbortedError, HookBundlerError
    from hook_bundler.core.logging import configure_logging
    from hook_bundler.factory import ServiceFactory

    verbose = getattr(args, "verbose", False)
    report_path: Path | None = getattr(args, "report", None)

    # Defaults until settings load
    configure_logging(level="DEBUG" if verbose else "INFO")
    try:
        settings = get_settings()
    except ValueError as e:
        logger.error(f"Build failed: invalid configuration: {e}")
        return 1
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_format=settings.log_json,
    )

    try:
        service = ServiceFactory(settings).create_build_service()
        report = service.run()
    except BuildAbortedError as e:
        if report_path is not None:
            _write_report(report_path, e.report.model_dump_json(indent=2))
        logger.error(f"Build failed: {e}", exc_info=verbose)
        return 1
    except (HookBundlerError, OSError) as e:
        logger.error(f"Build failed: {e}", exc_info=verbose)
        return 1
    except Exception as e:
        logger.error(f"Build failed: {type(e).__name__}: {e}", exc_info=True)
        return 1

    if report_path is not None:
        _write_report(report_path, report.model_dump_json(indent=2))

    summary = report.summary()
    logger.debug(
        f"{summary['processed']} written, {summary['skipped']} skipped "
        f"of {summary['total']} hooks"
    )
    return 0


def run_check(args: argparse.Namespace) -> int:
    """Verify the output directory matches the hook sources.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code (0 when in sync, 1 otherwise).
    """
    from hook_bundler.config import get_settings
    from hook_bundler.core.errors import HookBundlerError
    from hook_bundler.factory import ServiceFactory

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        result = ServiceFactory(settings).create_build_service().check()
    except (HookBundlerError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = result.model_dump(mode="json")
        payload["ok"] = result.ok
        print(json.dumps(payload, indent=2))
        return 0 if result.ok else 1

    print(f"Output: {result.dist_dir}")
    if result.ok:
        print("OK: All hooks in sync.")
        return 0

    if result.missing:
        print("MISSING in output:")
        for name in result.missing:
            print(f"  {name}")
    if result.out_of_sync:
        print("OUT OF SYNC:")
        for name in result.out_of_sync:
            print(f"  {name}")
    if result.sidecars:
        print("UNEXPECTED SIDECAR FILES:")
        for name in result.sidecars:
            print(f"  {name}")
    print()
    print("Run 'hook-bundler build' to fix.")
    return 1


def run_version() -> None:
    """Print version information."""
    from hook_bundler import __version__

    print(f"hook-bundler {__version__}")


def main() -> NoReturn:
    """Main entry point with subcommand support."""
    parser = argparse.ArgumentParser(
        prog="hook-bundler",
        description="Bundle hook scripts into self-contained distributable files",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    # Build command (default)
    build_parser = subparsers.add_parser(
        "build",
        help="Bundle and copy hooks into the output directory (default if no command given)",
    )
    build_parser.add_argument(
        "--report",
        type=Path,
        metavar="PATH",
        help="Write a JSON build report to PATH",
    )
    build_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Verify the output directory is in sync with the hook sources",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON only (for piping)",
    )

    args = parser.parse_args()

    if args.version:
        run_version()
        sys.exit(0)

    if args.command == "check":
        sys.exit(run_check(args))
    elif args.command == "build" or args.command is None:
        # Default to running the build
        sys.exit(run_build(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
