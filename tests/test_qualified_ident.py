"""Tests for fully-qualified identifiers."""

import pytest

from semver_meta.qualified_ident import QualifiedIdent


def test_parse_and_render() -> None:
    """Verify that the :: form survives parsing and rendering."""
    ident = QualifiedIdent.parse("crate::foo::Bar")
    assert ident.segments == ("crate", "foo", "Bar")
    assert str(ident) == "crate::foo::Bar"
    assert ident.head == "crate"
    assert ident.leaf == "Bar"
    assert ident.tail() == ("foo", "Bar")


@pytest.mark.parametrize("text", ["", "a::", "::b", "a::::b"])
def test_parse_rejects_empty_segments(text: str) -> None:
    """Verify that malformed paths are rejected."""
    with pytest.raises(ValueError, match="Not a valid path"):
        QualifiedIdent.parse(text)


def test_join_and_parent() -> None:
    """Verify joining segments and walking up to the parent."""
    base = QualifiedIdent.of("crate", "foo")
    assert base.join("bar", "Baz") == QualifiedIdent.of("crate", "foo", "bar", "Baz")
    assert base.parent() == QualifiedIdent.of("crate")
    assert QualifiedIdent.of("crate").parent() is None
    assert len(base) == 2
