"""Tree structure exceptions."""

from __future__ import annotations

from checktree.domain.exceptions.base import CheckTreeError


class StructuralMisuseError(CheckTreeError):
    """Child attached where the tree shape forbids it.

    Programmer error: node already owned by another parent,
    cycle through its own descendants, or a root used as a child.

    Attributes:
        parent_name: Name of the branch the child was attached to
        reason: Why the attachment is invalid
    """

    def __init__(self, parent_name: str, reason: str) -> None:
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.parent_name = parent_name
        self.reason = reason
        super().__init__(f"Cannot attach child to '{parent_name}': {reason}")
