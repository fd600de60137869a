"""Node factory: one constructor per result tree node variant.

An explicit instance, passed to whatever builds the tree for a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from checktree.domain.model.enums import BranchKind
from checktree.domain.model.nodes import (
    DEFAULT_ROOT_NAME,
    BranchNode,
    ErrorNode,
    RootNode,
    SuppressedNode,
    ViolationNode,
)
from checktree.domain.model.processing_error import ProcessingError
from checktree.domain.model.summary import always_show_counts

if TYPE_CHECKING:
    from checktree.domain.model.facts import (
        ProcessingErrorFact,
        SuppressedViolationFact,
        ViolationFact,
    )
    from checktree.domain.model.summary import SummaryPolicy
    from checktree.domain.ports import HostPanel


@dataclass(frozen=True, slots=True)
class NodeFactory:
    """Creates result tree nodes.

    Pure wrap-and-validate, no I/O. Only error_leaf() can fail.

    Attributes:
        summary_policy: Count summary policy given to every branch and root
    """

    summary_policy: SummaryPolicy = always_show_counts

    @classmethod
    def default(cls) -> NodeFactory:
        """Create factory with default settings."""
        return cls()

    def branch(self, name: str, kind: BranchKind = BranchKind.GROUP) -> BranchNode:
        """Create branch node. "name;tooltip" names are split.

        Args:
            name: Branch name, optionally with ";tooltip" suffix
            kind: What the branch groups
        """
        return BranchNode(name, kind=kind, summary_policy=self.summary_policy)

    def violation_leaf(self, violation: ViolationFact) -> ViolationNode:
        """Create leaf wrapping a violation."""
        return ViolationNode(violation=violation)

    def suppressed_leaf(self, suppressed: SuppressedViolationFact) -> SuppressedNode:
        """Create leaf wrapping a suppressed violation."""
        return SuppressedNode(suppressed=suppressed)

    def error_leaf(self, error: ProcessingErrorFact) -> ErrorNode:
        """Create leaf wrapping a processing error.

        Raises:
            MissingCauseError: Error has no cause or the cause has no message.
        """
        return ErrorNode(error=ProcessingError.from_fact(error))

    def root(self, host_panel: HostPanel | None, name: str = DEFAULT_ROOT_NAME) -> RootNode:
        """Create root node for the panel showing the tree.

        Args:
            host_panel: Panel receiving navigation requests
            name: Root label
        """
        return RootNode(name, host_panel=host_panel, summary_policy=self.summary_policy)
