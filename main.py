"""Entry point for extracting Rust crate metadata from a source checkout."""

from semver_meta.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
