"""Exception types raised while extracting crate metadata."""

from pathlib import PurePath


class SemverMetaError(Exception):
    """Base class for all extraction errors."""


class ScopeUnderflowError(SemverMetaError):
    """Raised when a module is exited without a matching enter."""

    def __init__(self) -> None:
        """Initialize with a fixed message."""
        super().__init__("exit_module called with no open module scope")


class InvalidPathError(SemverMetaError):
    """Raised when a path cannot be qualified from the current module."""


class MalformedDeclarationError(SemverMetaError):
    """Raised when a declaration lacks the data needed to describe it."""


class ModuleLoadError(SemverMetaError):
    """Raised when a referenced module file cannot be read or parsed."""

    def __init__(self, path: PurePath, reason: str) -> None:
        """Initialize with the module path and a human readable reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load module file {path}: {reason}")


class ModuleNotFoundInCrateError(ModuleLoadError):
    """Raised when no candidate file exists for a referenced module."""

    def __init__(self, path: PurePath, candidates: list[PurePath]) -> None:
        """Initialize with the requested path and every location tried."""
        self.candidates = candidates
        tried = ", ".join(str(c) for c in candidates)
        super().__init__(path, f"no such file (tried: {tried})")
