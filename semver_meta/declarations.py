"""Data models describing the public shape of individual declarations."""

from dataclasses import dataclass

from semver_meta.errors import MalformedDeclarationError
from semver_meta.items import (
    ConstItem,
    EnumItem,
    FnItem,
    MacroItem,
    StructItem,
    TraitItem,
)


@dataclass
class ConstMetadata:
    """Describes a const."""

    name: str

    @classmethod
    def from_item(cls, item: ConstItem) -> "ConstMetadata":
        return cls(item.name)


@dataclass
class EnumMetadata:
    """Describes an enum."""

    name: str

    @classmethod
    def from_item(cls, item: EnumItem) -> "EnumMetadata":
        return cls(item.name)


@dataclass
class FunctionMetadata:
    """Describes a free function."""

    name: str

    @classmethod
    def from_item(cls, item: FnItem) -> "FunctionMetadata":
        return cls(item.name)


@dataclass
class MacroMetadata:
    """Describes a macro_rules! definition."""

    name: str

    @classmethod
    def from_item(cls, item: MacroItem) -> "MacroMetadata":
        """Describe a macro item; invocations carry no name and are rejected."""
        if item.name is None:
            msg = "macro item has no name"
            raise MalformedDeclarationError(msg)
        return cls(item.name)


@dataclass
class StructMetadata:
    """Describes a struct."""

    name: str

    @classmethod
    def from_item(cls, item: StructItem) -> "StructMetadata":
        return cls(item.name)


@dataclass
class TraitMetadata:
    """Describes a trait."""

    name: str

    @classmethod
    def from_item(cls, item: TraitItem) -> "TraitMetadata":
        return cls(item.name)
