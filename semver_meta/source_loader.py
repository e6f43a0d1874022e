"""Logic for locating, reading and parsing module files of a crate."""

import logging
from pathlib import Path, PurePosixPath

from semver_meta.errors import ModuleLoadError, ModuleNotFoundInCrateError
from semver_meta.items import SourceFile
from semver_meta.rust_parser import RustParser

logger = logging.getLogger(__name__)

DEFAULT_MOD_FILE_NAMES = ["mod.rs"]


class SourceLoader:
    """Loads module files relative to a crate source directory."""

    def __init__(
        self,
        source_dir: Path | str,
        parser: RustParser | None = None,
        mod_file_names: list[str] | None = None,
    ) -> None:
        """Initialize the loader for files under ``source_dir``."""
        self.source_dir = Path(source_dir)
        self.parser = parser or RustParser()
        self.mod_file_names = mod_file_names or DEFAULT_MOD_FILE_NAMES

    def candidates(self, path: PurePosixPath) -> list[PurePosixPath]:
        """List the locations a module file may occupy, in lookup order.

        ``foo/bar.rs`` may also live in ``foo/bar/mod.rs``.
        """
        found = [path]
        if path.suffix:
            directory = path.with_suffix("")
            found.extend(directory / name for name in self.mod_file_names)
        return found

    def locate(self, path: PurePosixPath) -> Path:
        """Return the first existing file for ``path``."""
        tried = self.candidates(path)
        for candidate in tried:
            full = self.source_dir / candidate
            if full.is_file():
                return full
        raise ModuleNotFoundInCrateError(path, tried)

    def load(self, path: PurePosixPath | str) -> SourceFile:
        """Read and parse the module file at ``path``."""
        path = PurePosixPath(path)
        full = self.locate(path)
        try:
            source = full.read_bytes()
        except OSError as e:
            raise ModuleLoadError(path, str(e)) from e

        logger.debug("Loaded %s (%d bytes)", full, len(source))
        return self.parser.parse(source, path)
