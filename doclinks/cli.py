"""Command line entry point for resolving documentation links."""

import argparse
import logging
from pathlib import Path

from doclinks.run_resolution import run_resolution


def main(argv: list[str] | None = None) -> int:
    """Run the link resolution process."""
    ap = argparse.ArgumentParser(
        description="Assign output files and fragment IDs to documented symbols.",
    )
    ap.add_argument(
        "symbols",
        type=Path,
        help="YAML or JSON file with the doclets (and optional tutorials)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the link report to this JSON file instead of stdout",
    )
    ap.add_argument(
        "--resolve-descriptions",
        action="store_true",
        help="Resolve {@link} and {@tutorial} tags in doclet descriptions",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any error was reported",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
