"""Logic for hashing the settings that shape extracted metadata."""

import hashlib
import json
from typing import Any

# Sections that only change how a document is written, not what it holds.
PRESENTATION_KEYS = ("output",)


def extraction_settings(config: dict[str, Any]) -> dict[str, Any]:
    """Return the part of ``config`` that affects the extracted tree."""
    return {k: v for k, v in config.items() if k not in PRESENTATION_KEYS}


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a stable hash of the extraction settings.

    The same crate walked with the same settings hashes equally whether it
    is written as YAML or JSON.
    """
    settings_json = json.dumps(
        extraction_settings(config), sort_keys=True, ensure_ascii=True
    )
    return hashlib.sha256(settings_json.encode("utf-8")).hexdigest()
