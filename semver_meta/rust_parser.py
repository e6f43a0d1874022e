"""Tree-sitter adapter turning Rust source into item declarations.

Only item-level structure is mapped: the declarations of a file and, for
inline modules, the declarations of their bodies. Expressions, signatures and
bodies are never inspected.
"""

import logging
from pathlib import PurePosixPath
from typing import Any

import tree_sitter_rust
from tree_sitter import Language, Parser

from semver_meta.items import (
    ConstItem,
    EnumItem,
    FnItem,
    Item,
    MacroItem,
    ModItem,
    OtherItem,
    SourceFile,
    StructItem,
    TraitItem,
    UseItem,
)
from semver_meta.use_tree import flatten_use_tree, node_text

logger = logging.getLogger(__name__)

RUST_LANGUAGE = Language(tree_sitter_rust.language())

NAMED_ITEMS = {
    "const_item": ConstItem,
    "enum_item": EnumItem,
    "function_item": FnItem,
    "struct_item": StructItem,
    "trait_item": TraitItem,
}

# Nodes that sit between items but are not declarations.
TRIVIA = {"attribute_item", "inner_attribute_item", "line_comment", "block_comment"}


class RustParser:
    """Parses Rust source text into a SourceFile of items."""

    def __init__(self) -> None:
        """Initialize the tree-sitter parser for the Rust grammar."""
        self._parser = Parser(RUST_LANGUAGE)

    def parse(self, source: bytes | str, path: PurePosixPath | str = "") -> SourceFile:
        """Parse one file's contents."""
        if isinstance(source, str):
            source = source.encode("utf-8")
        tree = self._parser.parse(source)
        root = tree.root_node

        error_count = count_errors(root) if root.has_error else 0
        if error_count:
            logger.warning(
                "%s: %d syntax error(s), mapping what parsed", path, error_count
            )

        return SourceFile(
            path=PurePosixPath(path),
            items=map_items(root),
            error_count=error_count,
        )


def map_items(container: Any) -> list[Item]:
    """Map the named children of a source_file or declaration_list."""
    items: list[Item] = []
    for child in container.named_children:
        if child.type in TRIVIA:
            continue
        items.append(map_item(child))
    return items


def map_item(node: Any) -> Item:
    """Map a single item node to its Item representation."""
    kind = node.type

    if kind in NAMED_ITEMS:
        name = node.child_by_field_name("name")
        if name is None or name.is_missing:
            return OtherItem(kind)
        return NAMED_ITEMS[kind](node_text(name))

    if kind == "mod_item":
        return _map_mod(node)

    if kind == "macro_definition":
        name = node.child_by_field_name("name")
        return MacroItem(node_text(name) if name is not None else None)

    if kind == "macro_invocation":
        return MacroItem(None)

    if kind == "expression_statement":
        inner = node.named_children
        if len(inner) == 1 and inner[0].type == "macro_invocation":
            return MacroItem(None)
        return OtherItem(kind)

    if kind == "use_declaration":
        argument = node.child_by_field_name("argument")
        if argument is None:
            return UseItem()
        return UseItem(flatten_use_tree(argument))

    return OtherItem(kind)


def _map_mod(node: Any) -> Item:
    name = node.child_by_field_name("name")
    if name is None or name.is_missing:
        return OtherItem(node.type)
    body = node.child_by_field_name("body")
    items = map_items(body) if body is not None else None
    return ModItem(node_text(name), items)


def count_errors(root: Any) -> int:
    """Count ERROR and missing nodes below ``root``."""
    count = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            count += 1
        stack.extend(node.children)
    return count
