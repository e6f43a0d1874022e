"""Name-resolution context tracking module nesting during a crate walk.

The context mirrors the module hierarchy being visited with a stack of
scopes. Every scope owns an alias table mapping short names to
fully-qualified identifiers. Referenced modules (``mod foo;``) additionally
move ``current_path`` to the file that holds their body.

A driver pairs every :meth:`ResolutionContext.enter_module` with an
:meth:`ResolutionContext.exit_module`, registers aliases as it discovers
``use`` bindings and calls :meth:`ResolutionContext.resolve` for short names.
One context serves exactly one walk and is never shared.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import PurePosixPath
from typing import Protocol

from semver_meta.errors import InvalidPathError, ScopeUnderflowError
from semver_meta.module_path import (
    DEFAULT_EXTENSION,
    submodule_path,
    super_module_path,
)
from semver_meta.qualified_ident import QualifiedIdent
from semver_meta.scope import Scope
from semver_meta.scope_kind import ScopeKind

logger = logging.getLogger(__name__)


class ModuleDeclaration(Protocol):
    """Anything with a module name and an optional inline body."""

    name: str

    @property
    def is_inline(self) -> bool: ...


class ResolutionContext:
    """Tracks the active module scopes and the file being visited."""

    def __init__(
        self,
        root_path: PurePosixPath | str = "",
        *,
        fallback_to_root: bool = True,
        crate_root_name: str = "crate",
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        """Initialize a context positioned at the root module of ``root_path``."""
        self.root_path = PurePosixPath(root_path)
        self.current_path = self.root_path
        self.fallback_to_root = fallback_to_root
        self.crate_root_name = crate_root_name
        self.extension = extension
        self.base_scope = Scope.base_scope(crate_root_name)
        self.scopes: list[Scope] = []

    @property
    def depth(self) -> int:
        """Number of open module scopes below the root."""
        return len(self.scopes)

    @property
    def current_scope(self) -> Scope:
        """Return the innermost active scope."""
        return self.scopes[-1] if self.scopes else self.base_scope

    @property
    def module_path(self) -> QualifiedIdent:
        """Return the fully-qualified path of the module being visited."""
        return QualifiedIdent.of(self.crate_root_name, *(s.name for s in self.scopes))

    def enter_module(self, module: ModuleDeclaration) -> None:
        """Open a new scope for ``module``, moving to its file if referenced."""
        if module.is_inline:
            kind = ScopeKind.INLINE
        else:
            self.current_path = submodule_path(
                self.current_path,
                module.name,
                owns_directory=self.current_path == self.root_path,
                extension=self.extension,
            )
            kind = ScopeKind.REFERENCED

        self.scopes.append(Scope(kind, module.name))
        logger.debug(
            "Entered %s module %s (%s)", kind.value, self.module_path, self.current_path
        )

    def exit_module(self) -> Scope:
        """Close the innermost scope and return it."""
        if not self.scopes:
            raise ScopeUnderflowError

        scope = self.scopes.pop()
        if scope.kind is ScopeKind.REFERENCED:
            self.current_path = super_module_path(
                self.current_path, self.root_path, extension=self.extension
            )
        logger.debug("Exited module %s, back in %s", scope.name, self.current_path)
        return scope

    @contextmanager
    def module(self, module: ModuleDeclaration) -> Iterator[Scope]:
        """Enter ``module`` for the duration of a ``with`` block."""
        self.enter_module(module)
        try:
            yield self.current_scope
        finally:
            self.exit_module()

    def register_alias(
        self, short_ident: str, full_ident: QualifiedIdent
    ) -> QualifiedIdent | None:
        """Bind ``short_ident`` in the innermost scope.

        Returns the binding it replaced in that same scope, if any.
        """
        aliases = self.current_scope.aliases
        previous = aliases.get(short_ident)
        aliases[short_ident] = full_ident
        return previous

    def resolve(self, short_ident: str) -> QualifiedIdent | None:
        """Lookup the fully-qualified form of ``short_ident``.

        Scopes are searched innermost first; the root scope is the final
        fallback. Returns None when nothing binds the name.
        """
        for scope in reversed(self.scopes):
            found = scope.aliases.get(short_ident)
            if found is not None:
                return found

        if self._root_visible():
            return self.base_scope.aliases.get(short_ident)
        return None

    def qualify(self, path: QualifiedIdent) -> QualifiedIdent:
        """Rewrite a path as written in source into an absolute path.

        ``crate::``, ``self::`` and ``super::`` are anchored on the current
        module. A leading name bound in scope is replaced by its binding;
        anything else is assumed to name an external crate and kept as is.
        Only use bindings are consulted, so ``use foo::Bar`` next to
        ``mod foo;`` stays ``foo::Bar``; write ``self::foo::Bar`` for the
        child module.
        """
        head = path.head
        if head == "crate":
            return QualifiedIdent.of(self.crate_root_name, *path.tail())
        if head == "self":
            return self.module_path.join(*path.tail())
        if head == "super":
            base = self.module_path
            segments = list(path.segments)
            while segments and segments[0] == "super":
                parent = base.parent()
                if parent is None:
                    msg = f"{path} climbs above the crate root from {self.module_path}"
                    raise InvalidPathError(msg)
                base = parent
                segments.pop(0)
            return base.join(*segments)

        bound = self.resolve(head)
        if bound is None:
            return path
        return bound.join(*path.tail())

    def _root_visible(self) -> bool:
        if self.fallback_to_root:
            return True
        # Only while still inside the root file.
        return all(s.kind is ScopeKind.INLINE for s in self.scopes)
