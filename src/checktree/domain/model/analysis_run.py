"""Facts of one analysis run."""

from __future__ import annotations

from dataclasses import dataclass

from checktree.domain.model.facts import (
    ProcessingErrorFact,
    SuppressedViolationFact,
    ViolationFact,
)


@dataclass(frozen=True, slots=True)
class AnalysisRun:
    """Everything one analysis run reported.

    Immutable aggregate consumed by ResultTreeBuilder.

    Attributes:
        violations: Rule violations in report order
        suppressed: Suppressed violations in report order
        errors: Processing errors in report order
    """

    violations: tuple[ViolationFact, ...] = ()
    suppressed: tuple[SuppressedViolationFact, ...] = ()
    errors: tuple[ProcessingErrorFact, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for violation in self.violations:
            if not isinstance(violation, ViolationFact):
                raise TypeError(f"violations must contain ViolationFact, got {type(violation).__name__}")
        for suppressed in self.suppressed:
            if not isinstance(suppressed, SuppressedViolationFact):
                raise TypeError(
                    f"suppressed must contain SuppressedViolationFact, got {type(suppressed).__name__}"
                )
        for error in self.errors:
            if not isinstance(error, ProcessingErrorFact):
                raise TypeError(f"errors must contain ProcessingErrorFact, got {type(error).__name__}")

    @property
    def is_clean(self) -> bool:
        """Check if run reported nothing."""
        return not (self.violations or self.suppressed or self.errors)

    @classmethod
    def empty(cls) -> AnalysisRun:
        """Create run without any facts."""
        return cls(violations=(), suppressed=(), errors=())
