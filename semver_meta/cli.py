"""Command line interface for extracting Rust crate metadata."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from semver_meta.errors import SemverMetaError
from semver_meta.load_config import OUTPUT_FORMATS
from semver_meta.run_extraction import run_extraction


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    ap = argparse.ArgumentParser(
        prog="semver-meta",
        description=(
            "Extract fully-qualified declaration metadata from a Rust crate "
            "for semantic version comparison."
        ),
    )
    ap.add_argument(
        "root_file",
        type=Path,
        help="Crate root source file, e.g. src/lib.rs",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (default from config: yaml)",
    )
    ap.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the metadata document here instead of stdout",
    )
    ap.add_argument(
        "--list-names",
        action="store_true",
        help="Print one fully-qualified declaration name per line instead",
    )
    ap.add_argument(
        "--no-root-fallback",
        action="store_true",
        help="Do not resolve crate root imports from inside file-backed modules",
    )
    ap.add_argument(
        "--lenient",
        action="store_true",
        help="Record unreadable module files as empty instead of failing",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the extraction process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_extraction(args)
    except SemverMetaError as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    raise SystemExit(main())
