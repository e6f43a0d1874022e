"""Serialized form of an extraction run: a meta header plus the module tree."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from semver_meta.errors import SemverMetaError
from semver_meta.module_metadata import ModuleMetadata

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = 1


@dataclass
class MetadataDocument:
    """Extracted crate metadata together with how it was produced."""

    crate: ModuleMetadata
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls, crate: ModuleMetadata, *, config_hash: str, root_file: str
    ) -> "MetadataDocument":
        """Wrap a freshly extracted tree with the current schema header."""
        meta = {
            "schema_version": CURRENT_SCHEMA_VERSION,
            "config_hash": config_hash,
            "root_file": root_file,
        }
        return cls(crate=crate, meta=meta)

    def to_dict(self) -> dict[str, Any]:
        return {"meta": self.meta, "crate": self.crate.to_dict()}

    def dumps(self, fmt: str = "yaml") -> str:
        """Render the document as YAML or JSON text."""
        data = self.to_dict()
        if fmt == "json":
            return json.dumps(data, indent=2) + "\n"
        if fmt == "yaml":
            return yaml.safe_dump(data, sort_keys=False)
        msg = f"Unsupported output format: {fmt}"
        raise SemverMetaError(msg)

    def save(self, path: Path, fmt: str = "yaml") -> None:
        """Write the document to ``path``, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dumps(fmt), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> "MetadataDocument":
        """Read a document written by :meth:`save`."""
        text = path.read_text(encoding="utf-8")
        try:
            data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            msg = f"Cannot parse metadata document {path}: {e}"
            raise SemverMetaError(msg) from e

        if not isinstance(data, dict) or "crate" not in data:
            msg = f"Not a metadata document: {path}"
            raise SemverMetaError(msg)

        meta = data.get("meta") or {}
        schema_ver = meta.get("schema_version", 0)
        if schema_ver != CURRENT_SCHEMA_VERSION:
            logger.warning(
                "Schema version mismatch (%s != %s) in %s",
                schema_ver,
                CURRENT_SCHEMA_VERSION,
                path,
            )
        return cls(crate=ModuleMetadata.from_dict(data["crate"]), meta=meta)
