"""Data models for parsed item declarations.

``Item`` is a closed union. Anything the grammar defines that is not listed
here arrives as ``OtherItem`` and is ignored by consumers.
"""

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from semver_meta.qualified_ident import QualifiedIdent


@dataclass(frozen=True)
class UseBinding:
    """A short name introduced by a ``use`` declaration."""

    short: str
    path: QualifiedIdent  # as written, may start with crate/self/super


@dataclass
class ConstItem:
    name: str


@dataclass
class EnumItem:
    name: str


@dataclass
class FnItem:
    name: str


@dataclass
class MacroItem:
    """A macro at item position; only ``macro_rules!`` definitions are named."""

    name: str | None


@dataclass
class ModItem:
    """A module declaration; ``items`` is None when the body lives in its own file."""

    name: str
    items: list["Item"] | None = None

    @property
    def is_inline(self) -> bool:
        return self.items is not None


@dataclass
class StructItem:
    name: str


@dataclass
class TraitItem:
    name: str


@dataclass
class UseItem:
    bindings: list[UseBinding] = field(default_factory=list)


@dataclass
class OtherItem:
    """Any declaration kind without a dedicated representation."""

    kind: str


Item = (
    ConstItem
    | EnumItem
    | FnItem
    | MacroItem
    | ModItem
    | StructItem
    | TraitItem
    | UseItem
    | OtherItem
)


@dataclass
class SourceFile:
    """The parsed contents of one source file."""

    path: PurePosixPath
    items: list[Item] = field(default_factory=list)
    error_count: int = 0
