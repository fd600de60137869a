"""Tests for domain/model/counts.py."""

import pytest

from checktree.domain.model.counts import ERROR_UNIT, SUPPRESSED_UNIT, VIOLATION_UNIT, Counts


class TestCountsCreation:
    """Tests for valid Counts creation."""

    def test_defaults_are_zero(self) -> None:
        assert Counts() == Counts.zero()
        assert Counts.zero().total == 0

    def test_units(self) -> None:
        assert VIOLATION_UNIT == Counts(violations=1, suppressed=0, errors=0)
        assert SUPPRESSED_UNIT == Counts(violations=0, suppressed=1, errors=0)
        assert ERROR_UNIT == Counts(violations=0, suppressed=0, errors=1)

    def test_is_frozen(self) -> None:
        counts = Counts.zero()
        with pytest.raises(AttributeError):
            counts.violations = 1  # type: ignore[misc]


class TestCountsFailFirst:
    """Tests for FAIL-FIRST validation in Counts."""

    def test_negative_violations_raises(self) -> None:
        with pytest.raises(ValueError, match="violations must be >= 0"):
            Counts(violations=-1)

    def test_negative_suppressed_raises(self) -> None:
        with pytest.raises(ValueError, match="suppressed must be >= 0"):
            Counts(suppressed=-1)

    def test_negative_errors_raises(self) -> None:
        with pytest.raises(ValueError, match="errors must be >= 0"):
            Counts(errors=-1)


class TestCountsAddition:
    """Tests for Counts.__add__."""

    def test_add(self) -> None:
        total = Counts(1, 2, 3) + Counts(4, 5, 6)
        assert total == Counts(5, 7, 9)
        assert total.total == 21

    def test_add_units(self) -> None:
        total = VIOLATION_UNIT + VIOLATION_UNIT + SUPPRESSED_UNIT + ERROR_UNIT
        assert total == Counts(violations=2, suppressed=1, errors=1)

    def test_add_non_counts_raises(self) -> None:
        with pytest.raises(TypeError):
            Counts.zero() + 1  # type: ignore[operator]
