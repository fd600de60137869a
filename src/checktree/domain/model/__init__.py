"""Domain model entities."""

from checktree.domain.model.aggregation import compute_counts, node_counts, walk
from checktree.domain.model.analysis_run import AnalysisRun
from checktree.domain.model.counts import Counts
from checktree.domain.model.enums import BranchKind, StyleHint
from checktree.domain.model.facts import (
    ProcessingErrorFact,
    SuppressedViolationFact,
    ViolationFact,
)
from checktree.domain.model.nodes import (
    BranchNode,
    ErrorNode,
    LeafNode,
    ResultNode,
    RootNode,
    SuppressedNode,
    ViolationNode,
)
from checktree.domain.model.position import Position, parse_position
from checktree.domain.model.processing_error import ProcessingError
from checktree.domain.model.summary import (
    SummaryPolicy,
    always_show_counts,
    never_show_counts,
    show_counts_for_rules,
)

__all__ = [
    # Enums
    "BranchKind",
    "StyleHint",
    # Value objects
    "Counts",
    "Position",
    # Facts
    "AnalysisRun",
    "ViolationFact",
    "SuppressedViolationFact",
    "ProcessingErrorFact",
    "ProcessingError",
    # Nodes
    "RootNode",
    "BranchNode",
    "ViolationNode",
    "SuppressedNode",
    "ErrorNode",
    "ResultNode",
    "LeafNode",
    # Aggregation
    "compute_counts",
    "node_counts",
    "walk",
    # Parsing
    "parse_position",
    # Summary policies
    "SummaryPolicy",
    "always_show_counts",
    "never_show_counts",
    "show_counts_for_rules",
]
