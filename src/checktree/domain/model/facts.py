"""Analysis engine facts fed into the result tree.

Facts are produced outside checktree. They are validated on construction
so the tree never has to second-guess them.
"""

from __future__ import annotations

from dataclasses import dataclass

from checktree.domain.model.position import Position


@dataclass(frozen=True, slots=True)
class ViolationFact:
    """One rule violation found by the analysis engine.

    Attributes:
        rule_name: Name of violated rule
        rule_set_name: Rule set the rule belongs to (may carry ";tooltip")
        file: File identifier
        line: Line number (1-based)
        column: Column number (1-based)
        message: Human-readable message
    """

    rule_name: str
    rule_set_name: str
    file: str
    line: int
    column: int
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if not self.rule_set_name:
            raise ValueError("rule_set_name must not be empty")
        if not self.file:
            raise ValueError("file must not be empty")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")

    @property
    def position(self) -> Position:
        """Position of the violation."""
        return Position(line=self.line, column=self.column)


@dataclass(frozen=True, slots=True)
class SuppressedViolationFact:
    """Violation the analysed code suppressed (annotation, NOPMD comment, ...).

    Attributes:
        rule_name: Name of suppressed rule
        rule_set_name: Rule set the rule belongs to
        file: File identifier
        reason: Suppression reason as reported by the engine
        line: Line number (1-based)
        column: Column number (1-based)
    """

    rule_name: str
    rule_set_name: str
    file: str
    reason: str
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if not self.rule_set_name:
            raise ValueError("rule_set_name must not be empty")
        if not self.file:
            raise ValueError("file must not be empty")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")

    @property
    def position(self) -> Position:
        """Position of the suppressed violation."""
        return Position(line=self.line, column=self.column)


@dataclass(frozen=True, slots=True)
class ProcessingErrorFact:
    """File the analysis engine failed to process.

    The error is expected to be chained (raise ... from cause); the cause
    message usually holds the parser position.

    Attributes:
        msg: Short message (error type and detail)
        error: Exception raised while processing the file
        file: File identifier
    """

    msg: str
    error: BaseException
    file: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.msg:
            raise ValueError("msg must not be empty")
        if self.error is None:
            raise TypeError("error must not be None")
