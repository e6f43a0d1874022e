"""Types shared with the diff tooling that classifies changes between versions."""

from enum import IntEnum
from typing import Protocol, Self


class ChangeType(IntEnum):
    """Kind of version bump a code change requires, ordered by severity."""

    PATCH = 0
    MINOR = 1
    MAJOR = 2


class Delta(Protocol):
    """A single change between two versions of a declaration."""

    def change_type(self) -> ChangeType:
        """Determine the version bump this change requires."""
        ...


class Diffable(Protocol):
    """Source code that can be compared with a newer version of itself."""

    def diff(self, new: Self) -> list[Delta]:
        """Return the changes made going from ``self`` to ``new``."""
        ...


def required_change(deltas: list[Delta]) -> ChangeType:
    """Return the most severe change type among ``deltas``, PATCH if empty."""
    return max((d.change_type() for d in deltas), default=ChangeType.PATCH)
