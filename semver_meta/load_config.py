"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from semver_meta.deep_merge import deep_merge
from semver_meta.errors import SemverMetaError

DEFAULT_CONFIG: dict[str, Any] = {
    "source_extension": ".rs",
    "crate_root_name": "crate",
    "resolution": {
        "fallback_to_root": True,
    },
    "loading": {
        "strict": True,
        "mod_file_names": ["mod.rs"],
    },
    "output": {
        "format": "yaml",
    },
}

OUTPUT_FORMATS = ("yaml", "json")


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {path}"
            raise SemverMetaError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in config file {path}: {e}"
            raise SemverMetaError(msg) from e
        if not isinstance(user_config, dict):
            msg = f"Config file must contain a mapping: {path}"
            raise SemverMetaError(msg)
        config = deep_merge(config, user_config)

    fmt = config["output"]["format"]
    if fmt not in OUTPUT_FORMATS:
        msg = f"Unsupported output format {fmt!r}, expected one of {OUTPUT_FORMATS}"
        raise SemverMetaError(msg)
    return config
