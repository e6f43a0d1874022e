"""Tests for locating and loading module files."""

from pathlib import Path, PurePosixPath

import pytest

from semver_meta.errors import ModuleLoadError, ModuleNotFoundInCrateError
from semver_meta.items import FnItem, StructItem
from semver_meta.source_loader import SourceLoader


def test_load_plain_module_file(tmp_path: Path) -> None:
    """Verify that foo.rs is read and parsed."""
    (tmp_path / "foo.rs").write_text("pub fn run() {}\n")
    loader = SourceLoader(tmp_path)
    source = loader.load("foo.rs")
    assert source.items == [FnItem("run")]
    assert source.path == PurePosixPath("foo.rs")


def test_load_falls_back_to_mod_rs(tmp_path: Path) -> None:
    """Verify that foo/bar/mod.rs is found for foo/bar.rs."""
    target = tmp_path / "foo" / "bar"
    target.mkdir(parents=True)
    (target / "mod.rs").write_text("pub struct Bar;\n")

    loader = SourceLoader(tmp_path)
    assert loader.load(PurePosixPath("foo/bar.rs")).items == [StructItem("Bar")]


def test_plain_file_wins_over_mod_rs(tmp_path: Path) -> None:
    """Verify lookup order when both layouts exist."""
    (tmp_path / "foo.rs").write_text("pub fn plain() {}\n")
    (tmp_path / "foo").mkdir()
    (tmp_path / "foo" / "mod.rs").write_text("pub fn nested() {}\n")

    loader = SourceLoader(tmp_path)
    assert loader.load("foo.rs").items == [FnItem("plain")]


def test_candidates_include_configured_names(tmp_path: Path) -> None:
    """Verify that extra module file names are tried in order."""
    loader = SourceLoader(tmp_path, mod_file_names=["mod.rs", "index.rs"])
    assert loader.candidates(PurePosixPath("a/b.rs")) == [
        PurePosixPath("a/b.rs"),
        PurePosixPath("a/b/mod.rs"),
        PurePosixPath("a/b/index.rs"),
    ]


def test_missing_module_lists_candidates(tmp_path: Path) -> None:
    """Verify that a missing module reports every location tried."""
    loader = SourceLoader(tmp_path)
    with pytest.raises(ModuleNotFoundInCrateError) as exc_info:
        loader.load("ghost.rs")

    err = exc_info.value
    assert isinstance(err, ModuleLoadError)
    assert err.path == PurePosixPath("ghost.rs")
    assert err.candidates == [PurePosixPath("ghost.rs"), PurePosixPath("ghost/mod.rs")]
    assert "ghost/mod.rs" in str(err)


def test_directory_is_not_a_module_file(tmp_path: Path) -> None:
    """Verify that a directory named like the module file is not loaded."""
    (tmp_path / "odd.rs").mkdir()
    loader = SourceLoader(tmp_path)
    with pytest.raises(ModuleNotFoundInCrateError):
        loader.load("odd.rs")
