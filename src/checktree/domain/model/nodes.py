"""Result tree nodes.

Tree shape:
- RootNode holds one RULE_SET branch per rule set and a PROCESSING_ERRORS branch
- RULE_SET branches hold RULE branches and SuppressedNode leaves
- RULE branches hold ViolationNode leaves
- PROCESSING_ERRORS branch holds ErrorNode leaves

Parents own their children. The child -> parent link is a weak reference,
used only to walk up (invalidation, navigation).
"""

from __future__ import annotations

import logging
import threading
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from checktree.domain.exceptions import StructuralMisuseError
from checktree.domain.model.counts import Counts
from checktree.domain.model.enums import BranchKind, StyleHint
from checktree.domain.model.summary import always_show_counts, summary_fragments

if TYPE_CHECKING:
    from collections.abc import Iterator

    from checktree.domain.model.facts import SuppressedViolationFact, ViolationFact
    from checktree.domain.model.position import Position
    from checktree.domain.model.processing_error import ProcessingError
    from checktree.domain.model.summary import SummaryPolicy
    from checktree.domain.ports import HostPanel, RenderSurface

logger = logging.getLogger(__name__)

CUSTOM_RULE_DELIM = ";"
DEFAULT_ROOT_NAME = "Results"


@dataclass(slots=True, eq=False, weakref_slot=True)
class _ContainerNode:
    """Shared storage and count cache of RootNode and BranchNode.

    Counts are cached as one immutable Counts object. The cache is stale
    until computed and again after any child is attached below.
    """

    node_name: str
    tooltip: str | None = None
    summary_policy: SummaryPolicy = always_show_counts
    _children: list[ResultNode] = field(default_factory=list, init=False, repr=False)
    _parent: weakref.ref[_ContainerNode] | None = field(default=None, init=False, repr=False)
    _attached: bool = field(default=False, init=False, repr=False)
    _counts: Counts = field(default_factory=Counts.zero, init=False, repr=False)
    _stale: bool = field(default=True, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        """Split "name;tooltip" names used by custom rule sets."""
        name, delim, tip = self.node_name.partition(CUSTOM_RULE_DELIM)
        if delim:
            self.node_name = name
            if self.tooltip is None:
                self.tooltip = tip

    @property
    def children(self) -> tuple[ResultNode, ...]:
        """Direct children in attachment order."""
        return tuple(self._children)

    @property
    def parent(self) -> _ContainerNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def is_stale(self) -> bool:
        """Check if cached counts must be recomputed."""
        return self._stale

    def add_child(self, child: ResultNode) -> ResultNode:
        """Attach child as last child of this node.

        Args:
            child: Node without a parent

        Returns:
            The attached child (for chaining)

        Raises:
            StructuralMisuseError: child is a root, already attached,
                or this node itself or one of its ancestors.
        """
        match child:
            case RootNode():
                raise StructuralMisuseError(self.node_name, "a root node cannot be a child")
        # Attachment is permanent even after the parent is collected
        if child._attached:
            raise StructuralMisuseError(self.node_name, f"'{_label_of(child)}' already has a parent")
        if any(child is node for node in self._self_and_ancestors()):
            raise StructuralMisuseError(self.node_name, "attaching would create a cycle")

        self._children.append(child)
        child._parent = weakref.ref(self)
        child._attached = True
        self.invalidate()
        return child

    def invalidate(self) -> None:
        """Mark counts of this node and all ancestors stale."""
        for node in self._self_and_ancestors():
            node._stale = True

    def compute_counts(self) -> Counts:
        """Recompute counts of this node and all descendant branches.

        Returns:
            Freshly computed counts
        """
        from checktree.domain.model.aggregation import compute_counts

        return compute_counts(self)  # type: ignore[arg-type]

    def refresh(self) -> Counts:
        """Recompute own counts from the cached counts of direct children.

        Descendant branches must already be up to date.
        """
        from checktree.domain.model.aggregation import sum_children

        with self._lock:
            # Cleared before summing so an attachment during the sum stays visible
            self._stale = False
            counts = sum_children(self)  # type: ignore[arg-type]
            self._counts = counts
        return counts

    @property
    def cached_counts(self) -> Counts:
        """Last computed counts, without recomputation."""
        return self._counts

    @property
    def counts(self) -> Counts:
        """Counts, recomputed first if stale."""
        if self._stale:
            return self.compute_counts()
        return self._counts

    @property
    def violation_count(self) -> int:
        """Violation count. Recomputes all counts when stale."""
        if self._stale:
            self.compute_counts()
        return self._counts.violations

    @property
    def suppressed_count(self) -> int:
        """Suppressed violation count. Cached value, never recomputes."""
        return self._counts.suppressed

    @property
    def error_count(self) -> int:
        """Processing error count. Cached value, never recomputes."""
        return self._counts.errors

    def render(self, surface: RenderSurface, expanded: bool) -> None:
        """Append node name and, if the policy allows, the count summary."""
        surface.append(self.node_name)
        if self.summary_policy(self):  # type: ignore[arg-type]
            for fragment in summary_fragments(self.counts):
                surface.append(fragment, StyleHint.GRAYED)

    def can_navigate(self) -> bool:
        return False

    def navigate(self, request_focus: bool = True) -> bool:
        return False

    def _self_and_ancestors(self) -> Iterator[_ContainerNode]:
        node: _ContainerNode | None = self
        while node is not None:
            yield node
            node = node.parent


@dataclass(slots=True, eq=False)
class RootNode(_ContainerNode):
    """Root of a result tree built for one analysis run.

    Attributes:
        host_panel: Panel showing the tree; receives navigation requests
    """

    node_name: str = DEFAULT_ROOT_NAME
    host_panel: HostPanel | None = None


@dataclass(slots=True, eq=False)
class BranchNode(_ContainerNode):
    """Grouping node: rule set, rule, processing errors.

    Attributes:
        kind: What the branch groups
    """

    kind: BranchKind = BranchKind.GROUP

    @property
    def rule_name(self) -> str | None:
        """Rule governing this branch. None unless kind is RULE."""
        return self.node_name if self.kind is BranchKind.RULE else None


@dataclass(slots=True, eq=False, weakref_slot=True)
class _LeafNode(ABC):
    """Shared behaviour of leaves: fixed unit counts, navigation.

    Concrete leaves must implement file, position and render().
    """

    _parent: weakref.ref[_ContainerNode] | None = field(default=None, init=False, repr=False)
    _attached: bool = field(default=False, init=False, repr=False)

    @property
    def parent(self) -> _ContainerNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> tuple[ResultNode, ...]:
        return ()

    @property
    def counts(self) -> Counts:
        from checktree.domain.model.aggregation import node_counts

        return node_counts(self)  # type: ignore[arg-type]

    @property
    def violation_count(self) -> int:
        return self.counts.violations

    @property
    def suppressed_count(self) -> int:
        return self.counts.suppressed

    @property
    def error_count(self) -> int:
        return self.counts.errors

    @property
    @abstractmethod
    def file(self) -> str:
        """Source file the leaf points at."""

    @property
    @abstractmethod
    def position(self) -> Position:
        """Position within file."""

    @abstractmethod
    def render(self, surface: RenderSurface, expanded: bool) -> None:
        """Append the leaf label to surface."""

    def can_navigate(self) -> bool:
        """Check if leaf points at a resolvable file position."""
        return bool(self.file) and self.position.is_known

    def navigate(self, request_focus: bool = True) -> bool:
        """Ask the host panel to show this leaf's position.

        Args:
            request_focus: Whether the editor should take keyboard focus

        Returns:
            True if a navigation request was sent to the host.
        """
        if not self.can_navigate():
            return False

        panel = self._host_panel()
        if panel is None:
            logger.debug("Leaf %s:%s is not attached to a root with a host panel", self.file, self.position)
            return False

        panel.navigate_to(
            self.file,
            self.position.line,
            self.position.column,
            request_focus=request_focus,
        )
        return True

    def _host_panel(self) -> HostPanel | None:
        node = self.parent
        while node is not None:
            match node:
                case RootNode():
                    return node.host_panel
            node = node.parent
        return None


@dataclass(slots=True, eq=False)
class ViolationNode(_LeafNode):
    """Leaf wrapping one rule violation."""

    violation: ViolationFact = field(kw_only=True)

    @property
    def file(self) -> str:
        return self.violation.file

    @property
    def position(self) -> Position:
        return self.violation.position

    @property
    def tooltip(self) -> str:
        return self.violation.message

    def render(self, surface: RenderSurface, expanded: bool) -> None:
        surface.append(self.position.text, StyleHint.GRAYED)
        surface.append(self.violation.message)
        surface.append(f" [{self.file}]", StyleHint.GRAYED)


@dataclass(slots=True, eq=False)
class SuppressedNode(_LeafNode):
    """Leaf wrapping one suppressed violation."""

    suppressed: SuppressedViolationFact = field(kw_only=True)

    @property
    def file(self) -> str:
        return self.suppressed.file

    @property
    def position(self) -> Position:
        return self.suppressed.position

    @property
    def tooltip(self) -> str:
        return self.suppressed.reason

    def render(self, surface: RenderSurface, expanded: bool) -> None:
        surface.append(self.position.text, StyleHint.GRAYED)
        surface.append(self.suppressed.rule_name)
        surface.append(f" suppressed: {self.suppressed.reason}", StyleHint.GRAYED)
        surface.append(f" [{self.file}]", StyleHint.GRAYED)


@dataclass(slots=True, eq=False)
class ErrorNode(_LeafNode):
    """Leaf wrapping one processing error."""

    error: ProcessingError = field(kw_only=True)

    @property
    def file(self) -> str:
        return self.error.file

    @property
    def position(self) -> Position:
        return self.error.position

    @property
    def tooltip(self) -> str:
        return self.error.cause_msg

    def render(self, surface: RenderSurface, expanded: bool) -> None:
        surface.append(self.error.position_text, StyleHint.GRAYED)
        surface.append(self.error.msg, StyleHint.ERROR)
        surface.append(f" [{self.file}]", StyleHint.GRAYED)


ResultNode = RootNode | BranchNode | ViolationNode | SuppressedNode | ErrorNode
LeafNode = ViolationNode | SuppressedNode | ErrorNode


def _label_of(node: ResultNode) -> str:
    match node:
        case RootNode() | BranchNode():
            return node.node_name
        case ViolationNode() | SuppressedNode() | ErrorNode():
            return f"{node.file}:{node.position.line}"
