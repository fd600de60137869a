"""Tests for ConsoleTreeReporter.

Tests:
- ConsoleConfig default values and validation
- report() header and tree output
- Filters (show_suppressed, show_errors, max_depth)
- Summary policy integration
"""

import pytest

from checktree.application.builder import ResultTreeBuilder
from checktree.application.factory import NodeFactory
from checktree.domain.model.summary import show_counts_for_rules
from checktree.presentation.console import ConsoleConfig, ConsoleTreeReporter
from tests.factories import make_error_fact, make_run, make_suppressed, make_violation


def build_sample_root(factory: NodeFactory | None = None):  # type: ignore[no-untyped-def]
    run = make_run(
        violations=(
            make_violation(rule_name="UnusedLocalVariable", message="Avoid unused local variables", line=3),
            make_violation(rule_name="UnusedLocalVariable", message="Avoid unused local variables", line=8),
            make_violation(rule_set_name="errorprone", rule_name="EmptyCatchBlock", message="Avoid empty catch"),
        ),
        suppressed=(make_suppressed(reason="NOPMD"),),
        errors=(make_error_fact(msg="ParseException: Broken.java", file="Broken.java"),),
    )
    return ResultTreeBuilder(factory=factory).build(run)


def plain_config(**kwargs: object) -> ConsoleConfig:
    return ConsoleConfig(color=False, **kwargs)  # type: ignore[arg-type]


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.show_header is True
        assert config.show_suppressed is True
        assert config.show_errors is True
        assert config.max_depth is None
        assert config.color is True
        assert config.width == 120
        assert config.styles is None

    def test_negative_max_depth_raises(self) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            ConsoleConfig(max_depth=-1)

    def test_zero_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width"):
            ConsoleConfig(width=0)


class TestConsoleTreeReporter:
    """Tests for ConsoleTreeReporter.report()."""

    def test_header(self) -> None:
        output = ConsoleTreeReporter(plain_config()).report(build_sample_root())
        assert "ANALYSIS RESULT" in output
        assert "Violations: 3" in output
        assert "Suppressed: 1" in output
        assert "Errors: 1" in output

    def test_no_header(self) -> None:
        output = ConsoleTreeReporter(plain_config(show_header=False)).report(build_sample_root())
        assert "ANALYSIS RESULT" not in output

    def test_tree_labels(self) -> None:
        output = ConsoleTreeReporter(plain_config()).report(build_sample_root())
        assert "Results (3 violations) (1 suppressed violation) (1 processing error)" in output
        assert "bestpractices (2 violations) (1 suppressed violation)" in output
        assert "UnusedLocalVariable (2 violations)" in output
        assert "(3, 5) Avoid unused local variables" in output
        assert "EmptyCatchBlock (1 violation)" in output
        assert "SystemPrintln suppressed: NOPMD" in output
        assert "Processing errors (1 processing error)" in output
        assert "(42, 7) ParseException: Broken.java [Broken.java]" in output

    def test_hide_suppressed(self) -> None:
        output = ConsoleTreeReporter(plain_config(show_suppressed=False)).report(build_sample_root())
        assert "suppressed: NOPMD" not in output
        assert "UnusedLocalVariable" in output

    def test_hide_errors(self) -> None:
        output = ConsoleTreeReporter(plain_config(show_errors=False)).report(build_sample_root())
        assert "Processing errors" not in output
        assert "ParseException" not in output

    def test_max_depth_zero_shows_root_only(self) -> None:
        output = ConsoleTreeReporter(plain_config(show_header=False, max_depth=0)).report(build_sample_root())
        assert "Results" in output
        assert "bestpractices" not in output

    def test_max_depth_one_shows_rule_sets(self) -> None:
        output = ConsoleTreeReporter(plain_config(show_header=False, max_depth=1)).report(build_sample_root())
        assert "bestpractices" in output
        assert "errorprone" in output
        assert "UnusedLocalVariable" not in output

    def test_rule_gated_summary(self) -> None:
        factory = NodeFactory(summary_policy=show_counts_for_rules("UnusedLocalVariable"))
        output = ConsoleTreeReporter(plain_config(show_header=False)).report(build_sample_root(factory))
        assert "UnusedLocalVariable (2 violations)" in output
        assert "EmptyCatchBlock (1 violation)" not in output
        assert "EmptyCatchBlock" in output
        assert "Results (" not in output

    def test_color_output_contains_ansi(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.delenv("NO_COLOR", raising=False)
        output = ConsoleTreeReporter().report(build_sample_root())
        assert "\x1b[" in output

    def test_plain_output_has_no_ansi(self) -> None:
        output = ConsoleTreeReporter(plain_config()).report(build_sample_root())
        assert "\x1b[" not in output

    def test_empty_tree(self) -> None:
        root = ResultTreeBuilder().build(make_run())
        output = ConsoleTreeReporter(plain_config()).report(root)
        assert "Results (0 violations)" in output
