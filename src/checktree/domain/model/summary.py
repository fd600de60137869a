"""Count summary shown after branch names.

Whether a branch shows " (3 violations)" is a policy, injected through
the node factory. Default: every branch shows it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from checktree.domain.model.counts import Counts
    from checktree.domain.model.nodes import BranchNode, RootNode

SummaryPolicy: TypeAlias = "Callable[[RootNode | BranchNode], bool]"


def always_show_counts(branch: RootNode | BranchNode) -> bool:
    """Every branch shows its count summary."""
    return True


def never_show_counts(branch: RootNode | BranchNode) -> bool:
    """No branch shows a count summary."""
    return False


def show_counts_for_rules(*rule_names: str) -> SummaryPolicy:
    """Only RULE branches whose rule is listed show a count summary.

    Args:
        rule_names: Rule names allowed to show counts

    Returns:
        Policy callable
    """
    if not rule_names:
        raise ValueError("at least one rule name required")
    allowed = frozenset(rule_names)

    def policy(branch: RootNode | BranchNode) -> bool:
        from checktree.domain.model.nodes import BranchNode

        match branch:
            case BranchNode():
                return branch.rule_name in allowed
        return False

    return policy


def count_message(count_name: str, count: int) -> str:
    """Format " (N name)" with plural s when count != 1."""
    plural = "s" if count != 1 else ""
    return f" ({count} {count_name}{plural})"


def summary_fragments(counts: Counts) -> list[str]:
    """Summary fragments for non-zero counts, or "(0 violations)" if all zero."""
    fragments: list[str] = []
    if counts.violations > 0:
        fragments.append(count_message("violation", counts.violations))
    if counts.suppressed > 0:
        fragments.append(count_message("suppressed violation", counts.suppressed))
    if counts.errors > 0:
        fragments.append(count_message("processing error", counts.errors))
    if not fragments:
        fragments.append(count_message("violation", 0))
    return fragments
