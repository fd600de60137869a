"""Tests for application/factory.py."""

import pytest

from checktree.application.factory import NodeFactory
from checktree.domain.exceptions import MissingCauseError
from checktree.domain.model.enums import BranchKind
from checktree.domain.model.facts import ProcessingErrorFact
from checktree.domain.model.nodes import BranchNode, ErrorNode, RootNode, SuppressedNode, ViolationNode
from checktree.domain.model.summary import always_show_counts, never_show_counts
from tests.factories import RecordingPanel, make_chained_error, make_error_fact, make_suppressed, make_violation


class TestNodeFactory:
    """Tests for NodeFactory constructors."""

    def test_default(self) -> None:
        factory = NodeFactory.default()
        assert factory.summary_policy is always_show_counts

    def test_instances_are_independent(self) -> None:
        assert NodeFactory() is not NodeFactory()

    def test_branch(self) -> None:
        branch = NodeFactory().branch("MyRuleSet;Custom tooltip text", BranchKind.RULE_SET)
        assert isinstance(branch, BranchNode)
        assert branch.node_name == "MyRuleSet"
        assert branch.tooltip == "Custom tooltip text"
        assert branch.kind is BranchKind.RULE_SET

    def test_branch_default_kind(self) -> None:
        assert NodeFactory().branch("x").kind is BranchKind.GROUP

    def test_violation_leaf(self) -> None:
        fact = make_violation()
        leaf = NodeFactory().violation_leaf(fact)
        assert isinstance(leaf, ViolationNode)
        assert leaf.violation is fact

    def test_suppressed_leaf(self) -> None:
        fact = make_suppressed()
        leaf = NodeFactory().suppressed_leaf(fact)
        assert isinstance(leaf, SuppressedNode)
        assert leaf.suppressed is fact

    def test_error_leaf(self) -> None:
        fact = make_error_fact()
        leaf = NodeFactory().error_leaf(fact)
        assert isinstance(leaf, ErrorNode)
        assert leaf.error.fact is fact
        assert leaf.error.begin_line == 42

    def test_error_leaf_propagates_missing_cause(self) -> None:
        fact = ProcessingErrorFact(msg="boom", error=make_chained_error(cause=ValueError()), file="A.java")
        with pytest.raises(MissingCauseError):
            NodeFactory().error_leaf(fact)

    def test_root(self) -> None:
        panel = RecordingPanel()
        root = NodeFactory().root(panel)
        assert isinstance(root, RootNode)
        assert root.host_panel is panel
        assert root.node_name == "Results"

    def test_root_custom_name(self) -> None:
        assert NodeFactory().root(None, name="PMD Results").node_name == "PMD Results"

    def test_policy_injected(self) -> None:
        factory = NodeFactory(summary_policy=never_show_counts)
        assert factory.branch("x").summary_policy is never_show_counts
        assert factory.root(None).summary_policy is never_show_counts

    def test_is_frozen(self) -> None:
        factory = NodeFactory()
        with pytest.raises(AttributeError):
            factory.summary_policy = never_show_counts  # type: ignore[misc]
