"""Data model describing a module and everything declared in it."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from semver_meta.declarations import (
    ConstMetadata,
    EnumMetadata,
    FunctionMetadata,
    MacroMetadata,
    StructMetadata,
    TraitMetadata,
)
from semver_meta.qualified_ident import SEPARATOR

# Descriptor collections, in serialization order.
DECLARATION_FIELDS: dict[str, type] = {
    "consts": ConstMetadata,
    "enums": EnumMetadata,
    "functions": FunctionMetadata,
    "macros": MacroMetadata,
    "structs": StructMetadata,
    "traits": TraitMetadata,
}


@dataclass
class ModuleMetadata:
    """Describes a Rust module."""

    name: str
    path: str  # fully-qualified module path, e.g. crate::foo
    consts: list[ConstMetadata] = field(default_factory=list)
    enums: list[EnumMetadata] = field(default_factory=list)
    functions: list[FunctionMetadata] = field(default_factory=list)
    macros: list[MacroMetadata] = field(default_factory=list)
    structs: list[StructMetadata] = field(default_factory=list)
    traits: list[TraitMetadata] = field(default_factory=list)
    submodules: list["ModuleMetadata"] = field(default_factory=list)
    imports: dict[str, str] = field(default_factory=dict)  # short -> full

    def qualified_names(self) -> Iterator[str]:
        """Yield the fully-qualified name of every declaration, depth first."""
        for attr in DECLARATION_FIELDS:
            for decl in getattr(self, attr):
                yield f"{self.path}{SEPARATOR}{decl.name}"
        for sub in self.submodules:
            yield sub.path
            yield from sub.qualified_names()

    def find(self, path: str) -> "ModuleMetadata | None":
        """Return the module record with the given fully-qualified path."""
        if self.path == path:
            return self
        for sub in self.submodules:
            found = sub.find(path)
            if found is not None:
                return found
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data for YAML/JSON output."""
        data: dict[str, Any] = {"name": self.name, "path": self.path}
        for attr in DECLARATION_FIELDS:
            data[attr] = [{"name": d.name} for d in getattr(self, attr)]
        data["imports"] = dict(sorted(self.imports.items()))
        data["submodules"] = [s.to_dict() for s in self.submodules]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModuleMetadata":
        """Rebuild a record from the output of :meth:`to_dict`."""
        module = cls(name=data["name"], path=data.get("path", data["name"]))
        for attr, descriptor in DECLARATION_FIELDS.items():
            entries = data.get(attr) or []
            setattr(module, attr, [descriptor(e["name"]) for e in entries])
        module.imports = dict(data.get("imports") or {})
        module.submodules = [cls.from_dict(s) for s in data.get("submodules") or []]
        return module
