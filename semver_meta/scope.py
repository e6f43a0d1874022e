"""Data model for a single lexical module scope."""

from dataclasses import dataclass, field

from semver_meta.qualified_ident import QualifiedIdent
from semver_meta.scope_kind import ScopeKind


@dataclass
class Scope:
    """Represents one module body and the aliases visible inside it."""

    kind: ScopeKind
    name: str
    aliases: dict[str, QualifiedIdent] = field(default_factory=dict)

    @classmethod
    def base_scope(cls, crate_root_name: str = "crate") -> "Scope":
        """Create the root scope of a crate."""
        return cls(ScopeKind.ROOT, crate_root_name)
