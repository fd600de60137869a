"""Builds the result tree for one analysis run.

Root
├── rule set branch        (one per rule set, in first-seen order)
│   ├── rule branch        (one per rule, in first-seen order)
│   │   └── violation leaf
│   └── suppressed leaf
└── processing errors branch (only when the run has errors)
    └── error leaf
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from checktree.application.factory import NodeFactory
from checktree.domain.exceptions import MissingCauseError
from checktree.domain.model.enums import BranchKind
from checktree.domain.model.nodes import CUSTOM_RULE_DELIM, DEFAULT_ROOT_NAME

if TYPE_CHECKING:
    from checktree.domain.model.analysis_run import AnalysisRun
    from checktree.domain.model.facts import ProcessingErrorFact
    from checktree.domain.model.nodes import BranchNode, ErrorNode, RootNode
    from checktree.domain.ports import HostPanel

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Configuration for result tree builder.

    Attributes:
        root_name: Label of the root node.
        errors_branch_name: Label of the processing errors branch.
        skip_malformed_errors: Skip processing errors that cannot be wrapped
            (logged as warning) instead of raising MissingCauseError.
    """

    root_name: str = DEFAULT_ROOT_NAME
    errors_branch_name: str = "Processing errors"
    skip_malformed_errors: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.root_name:
            raise ValueError("root_name must not be empty")
        if not self.errors_branch_name:
            raise ValueError("errors_branch_name must not be empty")


class ResultTreeBuilder:
    """Groups the facts of a run into a result tree.

    Stateless between builds: every build() returns a new tree.
    """

    def __init__(self, factory: NodeFactory | None = None, config: BuildConfig | None = None) -> None:
        """Initialize builder.

        Args:
            factory: Node factory. Uses NodeFactory.default() if None.
            config: Builder configuration. Uses defaults if None.
        """
        self._factory = factory or NodeFactory.default()
        self._config = config or BuildConfig()

    def build(self, run: AnalysisRun, host_panel: HostPanel | None = None) -> RootNode:
        """Build tree from run facts and compute its counts.

        Args:
            run: Facts of one analysis run
            host_panel: Panel receiving navigation requests

        Returns:
            Root of the new tree, counts fresh.

        Raises:
            MissingCauseError: Malformed processing error and
                skip_malformed_errors is not set.
        """
        root = self._factory.root(host_panel, name=self._config.root_name)
        rule_sets: dict[str, BranchNode] = {}
        rules: dict[tuple[str, str], BranchNode] = {}

        for violation in run.violations:
            rule_set = self._rule_set_branch(root, rule_sets, violation.rule_set_name)
            key = (_display_name(violation.rule_set_name), violation.rule_name)
            rule = rules.get(key)
            if rule is None:
                rule = self._factory.branch(violation.rule_name, BranchKind.RULE)
                rule_set.add_child(rule)
                rules[key] = rule
            rule.add_child(self._factory.violation_leaf(violation))

        for suppressed in run.suppressed:
            rule_set = self._rule_set_branch(root, rule_sets, suppressed.rule_set_name)
            rule_set.add_child(self._factory.suppressed_leaf(suppressed))

        error_leaves = self._error_leaves(run.errors)
        if error_leaves:
            errors = self._factory.branch(self._config.errors_branch_name, BranchKind.PROCESSING_ERRORS)
            root.add_child(errors)
            for leaf in error_leaves:
                errors.add_child(leaf)

        counts = root.compute_counts()
        logger.debug(
            "Built result tree: %d rule sets, %d rules, %d violations, %d suppressed, %d errors",
            len(rule_sets),
            len(rules),
            counts.violations,
            counts.suppressed,
            counts.errors,
        )
        return root

    def _rule_set_branch(self, root: RootNode, rule_sets: dict[str, BranchNode], name: str) -> BranchNode:
        """Get or create the branch for a rule set.

        Keyed by display name: the first fact of a rule set fixes its tooltip.
        """
        key = _display_name(name)
        branch = rule_sets.get(key)
        if branch is None:
            branch = self._factory.branch(name, BranchKind.RULE_SET)
            root.add_child(branch)
            rule_sets[key] = branch
        return branch

    def _error_leaves(self, errors: tuple[ProcessingErrorFact, ...]) -> list[ErrorNode]:
        """Wrap processing errors. Skips or raises on malformed ones per config."""
        leaves: list[ErrorNode] = []
        for error in errors:
            try:
                leaves.append(self._factory.error_leaf(error))
            except MissingCauseError as e:
                if not self._config.skip_malformed_errors:
                    raise
                logger.warning("Skipping processing error: %s", e)
        return leaves


def _display_name(name: str) -> str:
    """Rule set name without a ";tooltip" suffix."""
    return name.partition(CUSTOM_RULE_DELIM)[0]
