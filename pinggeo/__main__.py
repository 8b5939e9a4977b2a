"""Entry point for the pinggeo command-line tool."""

import argparse
import logging
import sys

from pinggeo.catalog import DEFAULT_CATALOG, load_catalog_csv
from pinggeo.collector import make_prober
from pinggeo.config import Settings
from pinggeo.errors import NoUsableDataError, TargetUnreachableError
from pinggeo.logging_config import configure_logging
from pinggeo.orchestrator import locate
from pinggeo.report import format_progress, render_report

logger = logging.getLogger(__name__)

EXIT_UNREACHABLE = 1
EXIT_NO_DATA = 2


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser.

    Defaults come from PINGGEO_* environment variables (see Settings).
    """
    parser = argparse.ArgumentParser(
        prog="pinggeo",
        description="Estimate where a host is from round-trip latency to reference nodes",
    )
    parser.add_argument(
        "target",
        nargs="?",
        help="IP address or hostname to locate (prompted for when omitted)",
    )
    parser.add_argument(
        "--catalog",
        help="CSV file of reference nodes (default: built-in catalog)",
    )
    parser.add_argument(
        "--prober",
        choices=["ping", "fake"],
        help="Probe transport: system ping or simulated latencies",
    )
    parser.add_argument("--timeout", type=float, help="Per-probe timeout in seconds")
    parser.add_argument(
        "--max-concurrent",
        type=int,
        help="Maximum number of reference nodes probed at once",
    )
    parser.add_argument(
        "--top",
        type=int,
        dest="multilateration_count",
        help="Number of nodes used by multilateration",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: PINGGEO_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print probe progress",
    )
    return parser


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    settings = Settings.from_env()
    overrides = {
        "prober": args.prober,
        "timeout_s": args.timeout,
        "max_concurrent": args.max_concurrent,
        "multilateration_count": args.multilateration_count,
    }
    values = dict(vars(settings))
    values.update({key: value for key, value in overrides.items() if value is not None})
    return Settings(**values)


def prompt_target() -> str:
    """Ask for the target on stdin; empty input yields an empty string."""
    print("=" * 63)
    print("       LATENCY-BASED IP GEOLOCATION")
    print("=" * 63)
    try:
        return input("\nTarget IP address or hostname: ").strip()
    except EOFError:
        return ""


def print_progress(done: int, total: int, name: str, ok: bool) -> None:
    """Overwrite a single stderr line with the latest probe outcome."""
    end = "\n" if done == total else ""
    print("\r" + format_progress(done, total, name, ok).ljust(60), end=end, file=sys.stderr, flush=True)


def main(argv=None) -> int:
    """Main entry point; returns the process exit status."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        settings = build_settings(args)
    except ValueError as e:
        parser.error(str(e))

    target = args.target.strip() if args.target else prompt_target()
    if not target:
        print("Error: no target given", file=sys.stderr)
        return EXIT_UNREACHABLE

    if args.catalog:
        try:
            catalog = load_catalog_csv(args.catalog)
        except (OSError, ValueError) as e:
            logger.error("Cannot load catalog: %s", e)
            print(f"Error: cannot load catalog: {e}", file=sys.stderr)
            return EXIT_NO_DATA
    else:
        catalog = DEFAULT_CATALOG

    try:
        prober = make_prober(settings.prober)
        logger.info("Using %s prober", settings.prober)
    except OSError as e:
        # ping command not found or not accessible
        logger.error("Ping command unavailable: %s", e)
        print(f"Error: {e}. Install ping or use --prober fake.", file=sys.stderr)
        return EXIT_UNREACHABLE

    if settings.prober == "fake":
        print("Note: using simulated latencies (--prober fake)", file=sys.stderr)

    observer = None if args.quiet else print_progress

    try:
        report = locate(target, catalog, prober, settings, observer=observer)
    except TargetUnreachableError as e:
        print(f"\nError probing target: {e}", file=sys.stderr)
        print("\nCheck that:", file=sys.stderr)
        print("   - the address or hostname is valid", file=sys.stderr)
        print("   - ICMP echo is allowed by local privileges and firewalls", file=sys.stderr)
        return EXIT_UNREACHABLE
    except NoUsableDataError as e:
        print(f"\nError: {e}. Check your network connection.", file=sys.stderr)
        return EXIT_NO_DATA

    sys.stdout.write(render_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
