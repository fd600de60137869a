"""Rendering surface protocol.

Nodes append their label to a surface. NOT tied to any widget toolkit:
the host adapts the fragments to whatever it draws with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checktree.domain.model.enums import StyleHint


class RenderSurface(Protocol):
    """Contract for anything a node can render itself into.

    Example:
        class ListSurface:
            def __init__(self) -> None:
                self.fragments: list[tuple[str, StyleHint | None]] = []

            def append(self, text: str, style: StyleHint | None = None) -> None:
                self.fragments.append((text, style))
    """

    def append(self, text: str, style: StyleHint | None = None) -> None:
        """Append text fragment.

        Args:
            text: Text to append
            style: Styling hint, None = surface default
        """
        ...
