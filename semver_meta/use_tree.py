"""Logic for flattening ``use`` trees into alias bindings."""

from typing import Any

from semver_meta.items import UseBinding
from semver_meta.qualified_ident import QualifiedIdent

PATH_KEYWORDS = {"crate", "self", "super"}
SEGMENT_NODES = {"identifier", "crate", "self", "super", "metavariable"}


def node_text(node: Any) -> str:
    """Decode the source text of a tree-sitter node."""
    return node.text.decode("utf-8") if node.text else ""


def path_segments(node: Any) -> list[str]:
    """Extract the segments of an identifier or scoped_identifier node."""
    if node.type in SEGMENT_NODES:
        return [node_text(node)]
    if node.type == "scoped_identifier":
        path = node.child_by_field_name("path")
        name = node.child_by_field_name("name")
        prefix = path_segments(path) if path is not None else []
        return prefix + path_segments(name) if name is not None else prefix
    return []


def flatten_use_tree(node: Any, prefix: tuple[str, ...] = ()) -> list[UseBinding]:
    """Recursively turn one use tree into the short names it binds.

    ``use a::{b, c::d as e}`` yields ``b -> a::b`` and ``e -> a::c::d``.
    Glob imports and ``as _`` bind nothing.
    """
    kind = node.type

    if kind == "use_as_clause":
        path = node.child_by_field_name("path")
        alias = node.child_by_field_name("alias")
        segments = prefix + tuple(path_segments(path)) if path is not None else prefix
        if len(segments) > 1 and segments[-1] == "self":
            # use a::b::{self as c} binds c to a::b
            segments = segments[:-1]
        short = node_text(alias) if alias is not None else ""
        if not segments or not short or short == "_":
            return []
        return [UseBinding(short, QualifiedIdent(segments))]

    if kind == "use_list":
        bindings: list[UseBinding] = []
        for child in node.named_children:
            bindings.extend(flatten_use_tree(child, prefix))
        return bindings

    if kind == "scoped_use_list":
        path = node.child_by_field_name("path")
        use_list = node.child_by_field_name("list")
        if path is not None:
            prefix = prefix + tuple(path_segments(path))
        return flatten_use_tree(use_list, prefix) if use_list is not None else []

    if kind == "self" and prefix:
        # use a::b::{self} binds b
        return [UseBinding(prefix[-1], QualifiedIdent(prefix))]

    if kind in SEGMENT_NODES or kind == "scoped_identifier":
        segments = prefix + tuple(path_segments(node))
        if segments and segments[-1] == "self" and len(segments) > 1:
            segments = segments[:-1]
        if not segments or segments[-1] in PATH_KEYWORDS:
            return []
        return [UseBinding(segments[-1], QualifiedIdent(segments))]

    # use_wildcard, comments, attributes
    return []
