"""Bottom-up count aggregation over the result tree.

Leaves contribute a fixed unit. Branches sum their children, deepest
branches first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from checktree.domain.model.counts import ERROR_UNIT, SUPPRESSED_UNIT, VIOLATION_UNIT, Counts
from checktree.domain.model.nodes import (
    BranchNode,
    ErrorNode,
    RootNode,
    SuppressedNode,
    ViolationNode,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from checktree.domain.model.nodes import ResultNode


def node_counts(node: ResultNode) -> Counts:
    """Get counts of node without recomputation.

    Exhaustive match on ResultNode union. Branches answer their cache.
    """
    match node:
        case RootNode() | BranchNode():
            return node.cached_counts
        case ViolationNode():
            return VIOLATION_UNIT
        case SuppressedNode():
            return SUPPRESSED_UNIT
        case ErrorNode():
            return ERROR_UNIT


def sum_children(branch: RootNode | BranchNode) -> Counts:
    """Sum cached counts of direct children.

    Args:
        branch: Branch whose children are summed

    Returns:
        Sum over all children. Does not update branch's own cache.
    """
    total = Counts.zero()
    for child in branch.children:
        total += node_counts(child)
    return total


def compute_counts(branch: RootNode | BranchNode) -> Counts:
    """Recompute and cache counts for branch and all descendant branches.

    Iterative post-order: every branch is refreshed after all branches
    below it, so tree depth is not bounded by the recursion limit.
    """
    containers: list[RootNode | BranchNode] = []
    stack: list[RootNode | BranchNode] = [branch]
    while stack:
        current = stack.pop()
        containers.append(current)
        for child in current.children:
            match child:
                case RootNode() | BranchNode():
                    stack.append(child)

    # Reversed pre-order visits descendants before their ancestors
    counts = Counts.zero()
    for container in reversed(containers):
        counts = container.refresh()
    return counts


def walk(node: ResultNode) -> Iterator[tuple[ResultNode, int]]:
    """Iterate subtree depth-first, pre-order.

    Yields:
        (node, depth) pairs, depth 0 for the node itself.
    """
    stack: list[tuple[ResultNode, int]] = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        yield current, depth
        stack.extend((child, depth + 1) for child in reversed(current.children))
