"""Orchestration logic for extracting crate metadata from the command line."""

import argparse
import sys
from pathlib import Path
from typing import Any

from semver_meta.compute_config_hash import compute_config_hash
from semver_meta.crate_extractor import CrateExtractor
from semver_meta.load_config import load_config
from semver_meta.metadata_document import MetadataDocument
from semver_meta.source_loader import SourceLoader


def run_extraction(args: argparse.Namespace) -> int:
    """Execute the full extraction pipeline."""
    root_file: Path = args.root_file
    if not root_file.is_file():
        msg = f"Crate root file not found: {root_file}"
        raise SystemExit(msg)

    config = _effective_config(args)
    extractor = _build_extractor(root_file.parent, config)
    crate = extractor.extract(root_file.name)

    if args.list_names:
        for name in crate.qualified_names():
            print(name)
        return 0

    document = MetadataDocument.create(
        crate,
        config_hash=compute_config_hash(config),
        root_file=root_file.as_posix(),
    )
    fmt = config["output"]["format"]

    if args.output is None:
        sys.stdout.write(document.dumps(fmt))
        return 0

    document.save(args.output, fmt)
    total = sum(1 for _ in crate.qualified_names())
    print(
        f"Extracted {total} declarations from {len(extractor.loaded_files)} "
        f"file(s) into: {args.output}"
    )
    if extractor.skipped_modules:
        print(f"Skipped {len(extractor.skipped_modules)} unreadable module(s)")
    return 0


def _effective_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the config file and apply command line overrides."""
    config = load_config(args.config)
    if args.format:
        config["output"]["format"] = args.format
    if args.no_root_fallback:
        config["resolution"]["fallback_to_root"] = False
    if args.lenient:
        config["loading"]["strict"] = False
    return config


def _build_extractor(source_dir: Path, config: dict[str, Any]) -> CrateExtractor:
    """Create the loader and extractor described by ``config``."""
    loader = SourceLoader(
        source_dir, mod_file_names=config["loading"]["mod_file_names"]
    )
    return CrateExtractor(
        loader,
        fallback_to_root=config["resolution"]["fallback_to_root"],
        strict=config["loading"]["strict"],
        crate_root_name=config["crate_root_name"],
        extension=config["source_extension"],
    )
