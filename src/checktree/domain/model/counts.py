"""Aggregated count triple value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Counts:
    """Violation, suppressed violation and processing error counts.

    Immutable, so a branch can publish a new triple with one assignment
    and readers never see a half-updated set of counts.

    Attributes:
        violations: Number of rule violations
        suppressed: Number of suppressed violations
        errors: Number of processing errors
    """

    violations: int = 0
    suppressed: int = 0
    errors: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.violations < 0:
            raise ValueError(f"violations must be >= 0, got {self.violations}")
        if self.suppressed < 0:
            raise ValueError(f"suppressed must be >= 0, got {self.suppressed}")
        if self.errors < 0:
            raise ValueError(f"errors must be >= 0, got {self.errors}")

    def __add__(self, other: Counts) -> Counts:
        if not isinstance(other, Counts):
            return NotImplemented
        return Counts(
            violations=self.violations + other.violations,
            suppressed=self.suppressed + other.suppressed,
            errors=self.errors + other.errors,
        )

    @property
    def total(self) -> int:
        """Sum of all three counts."""
        return self.violations + self.suppressed + self.errors

    @classmethod
    def zero(cls) -> Counts:
        """Create empty counts."""
        return cls(violations=0, suppressed=0, errors=0)


VIOLATION_UNIT = Counts(violations=1)
SUPPRESSED_UNIT = Counts(suppressed=1)
ERROR_UNIT = Counts(errors=1)
