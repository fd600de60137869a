"""Console reporter: result tree → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.tree import Tree

from checktree.domain.model.enums import BranchKind
from checktree.domain.model.nodes import (
    BranchNode,
    ErrorNode,
    RootNode,
    SuppressedNode,
    ViolationNode,
)
from checktree.infrastructure.rich_surface import RichTextSurface

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.text import Text

    from checktree.domain.model.enums import StyleHint
    from checktree.domain.model.nodes import ResultNode


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console tree reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_header: Show title rule and totals line above the tree.
        show_suppressed: Show suppressed violation leaves.
        show_errors: Show processing errors branch and its leaves.
        max_depth: Deepest level whose children are shown. None = unlimited.
            Nodes at max_depth render collapsed.
        color: Emit ANSI styling. False = plain text output.
        width: Console width in characters.
        styles: StyleHint → rich style mapping. None = default styles.
    """

    show_header: bool = True
    show_suppressed: bool = True
    show_errors: bool = True
    max_depth: int | None = None
    color: bool = True
    width: int = 120
    styles: Mapping[StyleHint, str] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleTreeReporter:
    """Console reporter: renders a result tree as a rich tree.

    Output is str, not print(). Caller decides destination.
    Labels come from each node's own render(), so the console shows
    exactly what a host tree widget would.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, root: RootNode) -> str:
        """Format result tree as string.

        Args:
            root: Root of the tree to render.

        Returns:
            Formatted tree, with ANSI styling if config.color.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            color_system="auto" if self._config.color else None,
            no_color=not self._config.color,
            width=self._config.width,
        )

        if self._config.show_header:
            self._render_header(console, root)

        tree = Tree(self._label(root, expanded=self._is_expanded(0)))
        if self._is_expanded(0):
            self._add_children(tree, root, depth=1)
        console.print(tree)

        return output.getvalue()

    def _render_header(self, console: Console, root: RootNode) -> None:
        """Render title rule and totals."""
        counts = root.counts
        console.print()
        console.rule("[bold]ANALYSIS RESULT[/bold]")
        console.print()
        console.print(
            f"[bold]Violations:[/bold] {counts.violations}  "
            f"[bold]Suppressed:[/bold] {counts.suppressed}  "
            f"[bold]Errors:[/bold] {counts.errors}"
        )
        console.print()

    def _add_children(self, tree: Tree, node: ResultNode, depth: int) -> None:
        """Add visible children of node to rich tree, recursively."""
        expanded = self._is_expanded(depth)
        for child in node.children:
            if not self._is_visible(child):
                continue
            subtree = tree.add(self._label(child, expanded=expanded))
            if expanded:
                self._add_children(subtree, child, depth + 1)

    def _label(self, node: ResultNode, expanded: bool) -> Text:
        """Render node into rich Text."""
        surface = RichTextSurface(self._config.styles)
        node.render(surface, expanded)
        return surface.text

    def _is_expanded(self, depth: int) -> bool:
        return self._config.max_depth is None or depth < self._config.max_depth

    def _is_visible(self, node: ResultNode) -> bool:
        """Apply show_suppressed / show_errors filters."""
        match node:
            case SuppressedNode():
                return self._config.show_suppressed
            case ErrorNode():
                return self._config.show_errors
            case BranchNode(kind=BranchKind.PROCESSING_ERRORS):
                return self._config.show_errors
            case RootNode() | BranchNode() | ViolationNode():
                return True
