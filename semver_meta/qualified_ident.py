"""Data model for fully-qualified identifiers."""

from dataclasses import dataclass

SEPARATOR = "::"


@dataclass(frozen=True)
class QualifiedIdent:
    """An identifier expressed as its full module path, e.g. crate::foo::Bar."""

    segments: tuple[str, ...]

    @classmethod
    def parse(cls, text: str) -> "QualifiedIdent":
        """Build an identifier from its `::` separated text form."""
        parts = tuple(p.strip() for p in text.split(SEPARATOR))
        if not text or not all(parts):
            msg = f"Not a valid path: {text!r}"
            raise ValueError(msg)
        return cls(parts)

    @classmethod
    def of(cls, *segments: str) -> "QualifiedIdent":
        """Build an identifier from individual segments."""
        return cls(tuple(segments))

    @property
    def head(self) -> str:
        """Return the first segment."""
        return self.segments[0]

    @property
    def leaf(self) -> str:
        """Return the last segment."""
        return self.segments[-1]

    def tail(self) -> tuple[str, ...]:
        """Return every segment after the first."""
        return self.segments[1:]

    def join(self, *segments: str) -> "QualifiedIdent":
        """Return a new identifier with segments appended."""
        return QualifiedIdent(self.segments + tuple(segments))

    def parent(self) -> "QualifiedIdent | None":
        """Return the enclosing path, or None for a single segment."""
        if len(self.segments) <= 1:
            return None
        return QualifiedIdent(self.segments[:-1])

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)
