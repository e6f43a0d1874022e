"""Logic for mapping module nesting onto the file-per-module layout.

A referenced module ``mod bar;`` declared in ``foo.rs`` lives in ``foo/bar.rs``.
The crate root (``lib.rs``, ``main.rs`` or whatever file the walk started from)
owns its directory, so its children are its siblings: ``lib.rs`` declares
``foo`` which lives in ``foo.rs``.

An empty root path has no stem and is treated as the directory itself, so its
children map straight to ``<name>.rs``.
"""

from pathlib import PurePosixPath

DEFAULT_EXTENSION = ".rs"


def module_directory(path: PurePosixPath, *, owns_directory: bool) -> PurePosixPath:
    """Return the directory holding the child module files of ``path``."""
    if not path.stem:
        return path
    if owns_directory:
        return path.parent
    return path.parent / path.stem


def submodule_path(
    current: PurePosixPath,
    name: str,
    *,
    owns_directory: bool = False,
    extension: str = DEFAULT_EXTENSION,
) -> PurePosixPath:
    """Return the file of child module ``name`` declared in ``current``."""
    directory = module_directory(current, owns_directory=owns_directory)
    return directory / f"{name}{extension}"


def super_module_path(
    current: PurePosixPath,
    root: PurePosixPath,
    *,
    extension: str = DEFAULT_EXTENSION,
) -> PurePosixPath:
    """Return the file of the module that declared ``current``.

    Inverse of :func:`submodule_path`: ``foo/bar.rs`` -> ``foo.rs`` and
    ``foo.rs`` -> ``root``.
    """
    parent = current.parent
    if parent == module_directory(root, owns_directory=True):
        return root
    return parent.with_suffix(extension)
