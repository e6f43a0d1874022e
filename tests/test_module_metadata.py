"""Tests for module metadata records and declaration descriptors."""

import pytest

from semver_meta.declarations import (
    ConstMetadata,
    FunctionMetadata,
    MacroMetadata,
    StructMetadata,
)
from semver_meta.errors import MalformedDeclarationError
from semver_meta.items import MacroItem
from semver_meta.module_metadata import ModuleMetadata


def sample_tree() -> ModuleMetadata:
    """Create a two level module tree."""
    inner = ModuleMetadata(
        name="inner",
        path="crate::inner",
        functions=[FunctionMetadata("run")],
        imports={"Arc": "std::sync::Arc"},
    )
    return ModuleMetadata(
        name="crate",
        path="crate",
        consts=[ConstMetadata("MAX")],
        structs=[StructMetadata("Engine")],
        submodules=[inner],
    )


def test_macro_descriptor_requires_name() -> None:
    """Verify that unnamed macros are rejected as malformed."""
    assert MacroMetadata.from_item(MacroItem("m")) == MacroMetadata("m")
    with pytest.raises(MalformedDeclarationError):
        MacroMetadata.from_item(MacroItem(None))


def test_qualified_names_depth_first() -> None:
    """Verify names are listed parent first, then each child module."""
    assert list(sample_tree().qualified_names()) == [
        "crate::MAX",
        "crate::Engine",
        "crate::inner",
        "crate::inner::run",
    ]


def test_find() -> None:
    """Verify lookup of nested records by path."""
    tree = sample_tree()
    assert tree.find("crate") is tree
    found = tree.find("crate::inner")
    assert found is not None
    assert found.name == "inner"
    assert tree.find("crate::nowhere") is None


def test_to_dict_shape() -> None:
    """Verify the plain data layout used for serialization."""
    data = sample_tree().to_dict()
    assert data["name"] == "crate"
    assert data["consts"] == [{"name": "MAX"}]
    assert data["enums"] == []
    assert data["submodules"][0]["functions"] == [{"name": "run"}]
    assert data["submodules"][0]["imports"] == {"Arc": "std::sync::Arc"}


def test_from_dict_restores_tree() -> None:
    """Verify that a serialized tree is rebuilt equal to the original."""
    tree = sample_tree()
    assert ModuleMetadata.from_dict(tree.to_dict()) == tree


def test_from_dict_tolerates_missing_collections() -> None:
    """Verify that sparse input produces empty collections."""
    module = ModuleMetadata.from_dict({"name": "crate"})
    assert module.path == "crate"
    assert module.traits == []
    assert module.submodules == []
