"""Classification of module scopes by where their body lives."""

from enum import Enum


class ScopeKind(Enum):
    """Represents the type of a module scope."""

    ROOT = "root"  # top-level module of the entry file
    INLINE = "inline"  # body nested in the parent file
    REFERENCED = "referenced"  # body lives in its own file
