"""Tests for building module metadata from parsed items."""

from unittest.mock import MagicMock

from semver_meta.declarations import (
    ConstMetadata,
    FunctionMetadata,
    MacroMetadata,
    StructMetadata,
)
from semver_meta.items import (
    ConstItem,
    EnumItem,
    FnItem,
    MacroItem,
    ModItem,
    OtherItem,
    StructItem,
    TraitItem,
    UseItem,
)
from semver_meta.metadata_walker import walk_items
from semver_meta.module_metadata import ModuleMetadata


def test_collects_each_declaration_kind() -> None:
    """Verify that every recognized kind lands in its collection."""
    items = [
        ConstItem("A"),
        EnumItem("E"),
        FnItem("f"),
        MacroItem("m"),
        StructItem("S"),
        TraitItem("T"),
    ]
    module = walk_items("crate", items, path="crate")
    assert module.name == "crate"
    assert [c.name for c in module.consts] == ["A"]
    assert [e.name for e in module.enums] == ["E"]
    assert [f.name for f in module.functions] == ["f"]
    assert [m.name for m in module.macros] == ["m"]
    assert [s.name for s in module.structs] == ["S"]
    assert [t.name for t in module.traits] == ["T"]


def test_unknown_declarations_are_skipped() -> None:
    """Verify that unrecognized kinds vanish while siblings remain."""
    items = [
        FnItem("before"),
        OtherItem("impl_item"),
        UseItem(),
        OtherItem("some_future_item"),
        StructItem("after"),
    ]
    module = walk_items("crate", items, path="crate")
    assert module.functions == [FunctionMetadata("before")]
    assert module.structs == [StructMetadata("after")]
    assert list(module.qualified_names()) == ["crate::before", "crate::after"]


def test_unnamed_macro_is_skipped() -> None:
    """Verify that a macro without a name does not abort the walk."""
    items = [MacroItem(None), MacroItem("named"), ConstItem("C")]
    module = walk_items("crate", items, path="crate")
    assert module.macros == [MacroMetadata("named")]
    assert module.consts == [ConstMetadata("C")]


def test_inline_children_are_walked() -> None:
    """Verify that inline modules become nested records with full paths."""
    items = [ModItem("outer", [FnItem("f"), ModItem("inner", [ConstItem("K")])])]
    module = walk_items("crate", items, path="crate")

    outer = module.submodules[0]
    assert outer.path == "crate::outer"
    assert outer.functions == [FunctionMetadata("f")]
    inner = outer.submodules[0]
    assert inner.path == "crate::outer::inner"
    assert inner.consts == [ConstMetadata("K")]


def test_referenced_children_are_empty_without_visitor() -> None:
    """Verify that file-backed modules are not loaded by the walker."""
    module = walk_items("crate", [ModItem("remote")], path="crate")
    assert module.submodules == [ModuleMetadata(name="remote", path="crate::remote")]


def test_visitor_supplies_children() -> None:
    """Verify that the visitor is called for every child module."""
    visitor = MagicMock(side_effect=lambda m: ModuleMetadata(m.name, f"x::{m.name}"))
    items = [ModItem("a"), ModItem("b", [])]
    module = walk_items("crate", items, path="crate", visit_submodule=visitor)

    assert visitor.call_count == 2
    assert [s.path for s in module.submodules] == ["x::a", "x::b"]
