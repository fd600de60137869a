"""Host panel protocol: where navigation requests go."""

from __future__ import annotations

from typing import Protocol


class HostPanel(Protocol):
    """Contract for the panel that displays the result tree.

    The root node holds the panel. Leaves reach it through their parents
    when asked to navigate.
    """

    def navigate_to(self, file: str, line: int, column: int, *, request_focus: bool) -> None:
        """Move the host's focus to a position in a file.

        Args:
            file: File identifier
            line: Line number (1-based)
            column: Column number (1-based, 0 = start of line)
            request_focus: Whether the editor should take keyboard focus
        """
        ...
