"""Driver walking a crate depth-first and extracting module metadata.

The extractor owns the recursion across files: it pairs every module it
enters with an exit, registers ``use`` bindings before visiting a module's
items, and asks the loader for the body of each referenced module at the
location the resolution context maps it to.
"""

import logging
from collections.abc import Iterable
from pathlib import PurePosixPath

from semver_meta.errors import InvalidPathError, ModuleLoadError
from semver_meta.items import Item, ModItem, UseItem
from semver_meta.metadata_walker import walk_items
from semver_meta.module_metadata import ModuleMetadata
from semver_meta.module_path import DEFAULT_EXTENSION
from semver_meta.qualified_ident import QualifiedIdent
from semver_meta.resolution_context import ResolutionContext
from semver_meta.source_loader import SourceLoader

logger = logging.getLogger(__name__)


class CrateExtractor:
    """Extracts a ModuleMetadata tree for a crate rooted at one file."""

    def __init__(
        self,
        loader: SourceLoader,
        *,
        fallback_to_root: bool = True,
        strict: bool = True,
        crate_root_name: str = "crate",
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        """Initialize the extractor with its file loader and walk options."""
        self.loader = loader
        self.fallback_to_root = fallback_to_root
        self.strict = strict
        self.crate_root_name = crate_root_name
        self.extension = extension

        self.loaded_files: list[PurePosixPath] = []
        self.skipped_modules: list[str] = []

    def extract(self, root_file: PurePosixPath | str) -> ModuleMetadata:
        """Walk the crate whose root module lives in ``root_file``.

        ``root_file`` is relative to the loader's source directory.
        """
        self.loaded_files = []
        self.skipped_modules = []

        context = ResolutionContext(
            root_file,
            fallback_to_root=self.fallback_to_root,
            crate_root_name=self.crate_root_name,
            extension=self.extension,
        )
        source = self.loader.load(context.root_path)
        self.loaded_files.append(context.root_path)

        module = self._visit(context, self.crate_root_name, source.items)
        logger.info(
            "Extracted %s from %d file(s)", self.crate_root_name, len(self.loaded_files)
        )
        return module

    def _visit(
        self, context: ResolutionContext, name: str, items: list[Item]
    ) -> ModuleMetadata:
        self._register_uses(context, items)
        module = walk_items(
            name,
            items,
            path=str(context.module_path),
            visit_submodule=lambda sub: self._visit_submodule(context, sub),
        )
        module.imports = {
            short: str(full) for short, full in context.current_scope.aliases.items()
        }
        return module

    def _visit_submodule(
        self, context: ResolutionContext, mod_item: ModItem
    ) -> ModuleMetadata:
        with context.module(mod_item):
            if mod_item.items is not None:
                return self._visit(context, mod_item.name, mod_item.items)

            try:
                source = self.loader.load(context.current_path)
            except ModuleLoadError as e:
                if self.strict:
                    raise
                logger.warning("Skipping module %s: %s", context.module_path, e)
                self.skipped_modules.append(str(context.module_path))
                return ModuleMetadata(name=mod_item.name, path=str(context.module_path))

            self.loaded_files.append(context.current_path)
            return self._visit(context, mod_item.name, source.items)

    def _register_uses(self, context: ResolutionContext, items: Iterable[Item]) -> None:
        """Bind every name imported by the module's use declarations.

        All of a module's bindings are collected before any is qualified, so a
        use may start with a name imported further down the same module.
        """
        written: dict[str, QualifiedIdent] = {}
        for item in items:
            if not isinstance(item, UseItem):
                continue
            for binding in item.bindings:
                previous = written.get(binding.short)
                if previous is not None and previous != binding.path:
                    logger.debug(
                        "%s in %s rebound from %s to %s",
                        binding.short,
                        context.module_path,
                        previous,
                        binding.path,
                    )
                written[binding.short] = binding.path

        for short, path in written.items():
            try:
                full = self._qualify_use(context, path, written, {short})
            except InvalidPathError as e:
                logger.warning("Ignoring use in %s: %s", context.module_path, e)
                continue
            context.register_alias(short, full)

    def _qualify_use(
        self,
        context: ResolutionContext,
        path: QualifiedIdent,
        written: dict[str, QualifiedIdent],
        seen: set[str],
    ) -> QualifiedIdent:
        head = path.head
        # use foo::foo names the outer foo, not itself
        if head in written and head not in seen:
            base = self._qualify_use(context, written[head], written, seen | {head})
            return base.join(*path.tail())
        return context.qualify(path)
