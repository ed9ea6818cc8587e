"""Command line interface for deepcmp."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from .config import load_config
from .engine import Comparator
from .exceptions import ConfigError
from .models import CompareConfig
from .runner import FixtureRunner, load_document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deepcmp",
        description="Compare two JSON/YAML documents, or run a folder of fixtures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  deepcmp expected.json actual.json
  deepcmp expected.yaml actual.yaml --precision 6 --max-diff 50
  deepcmp --fixtures tests/fixtures --report report.json
        """
    )

    parser.add_argument("left", nargs="?", help="Path to the left (expected) document")
    parser.add_argument("right", nargs="?", help="Path to the right (actual) document")
    parser.add_argument("-f", "--fixtures", help="Path to a folder of fixture files")
    parser.add_argument("-r", "--report", help="Where to write the fixture report (JSON)")
    parser.add_argument("-c", "--config", help="Path to a YAML/JSON config file")
    parser.add_argument("--precision", type=int, help="Fractional digits compared for floats")
    parser.add_argument("--max-diff", type=int, help="Maximum number of differences reported")
    parser.add_argument("--max-depth", type=int, help="Maximum recursion depth")
    parser.add_argument("--private", action=argparse.BooleanOptionalAction,
                        help="Compare _private fields too (--no-private to turn off)")
    parser.add_argument("--log-errors", action=argparse.BooleanOptionalAction,
                        help="Log internal anomalies (--no-log-errors to turn off)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress console output")

    return parser


def resolve_config(args: argparse.Namespace) -> CompareConfig:
    """Config file first, then command line flags on top."""
    config = load_config(args.config) if args.config else CompareConfig()

    overrides = {}
    if args.precision is not None:
        overrides["float_precision"] = args.precision
    if args.max_diff is not None:
        overrides["max_diff"] = args.max_diff
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.private is not None:
        overrides["compare_private_fields"] = args.private
    if args.log_errors is not None:
        overrides["log_errors"] = args.log_errors

    return config.replace(**overrides) if overrides else config


def main(argv: list[str] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.fixtures and not (args.left and args.right):
        parser.error("Either LEFT and RIGHT or --fixtures is required")

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = resolve_config(args)
    except (ConfigError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.fixtures:
        if not Path(args.fixtures).exists():
            print(f"Error: Fixture folder not found: {args.fixtures}", file=sys.stderr)
            return 2

        report = FixtureRunner(args.fixtures, config).run(print_report=not args.quiet)

        if args.report:
            with open(args.report, 'w') as f:
                json.dump(report.to_dict(), indent=2, fp=f)
            if not args.quiet:
                print(f"\nReport saved to: {args.report}")

        return 0 if report.failed == 0 else 1

    documents = []
    for path in (Path(args.left), Path(args.right)):
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            return 2
        try:
            documents.append(load_document(path))
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            print(f"Error: Cannot parse {path}: {e}", file=sys.stderr)
            return 2

    diffs = Comparator(config).compare(*documents)
    if not args.quiet:
        for diff in diffs:
            print(diff)

    return 1 if diffs else 0


if __name__ == "__main__":
    sys.exit(main())
