"""Tests for domain/model/processing_error.py."""

import pytest

from checktree.domain.exceptions import CheckTreeError, MissingCauseError
from checktree.domain.model.facts import ProcessingErrorFact
from checktree.domain.model.position import Position
from checktree.domain.model.processing_error import ProcessingError
from tests.factories import PARSE_CAUSE_MSG, make_chained_error, make_error_fact


class TestProcessingErrorFromFact:
    """Tests for ProcessingError.from_fact()."""

    def test_position_parsed_from_cause(self) -> None:
        error = ProcessingError.from_fact(make_error_fact())
        assert error.cause_detail_msg == PARSE_CAUSE_MSG
        assert error.position == Position(line=42, column=7)
        assert error.begin_line == 42
        assert error.begin_column == 7
        assert error.position_text == "(42, 7) "

    def test_position_defaults_when_cause_has_no_position(self) -> None:
        error = ProcessingError.from_fact(make_error_fact(cause_msg="Out of memory"))
        assert error.begin_line == 0
        assert error.begin_column == 0
        assert error.position_text == "(0, 0) "

    def test_accessors(self) -> None:
        fact = make_error_fact(msg="ParseException: boom", file="B.java")
        error = ProcessingError.from_fact(fact)
        assert error.fact is fact
        assert error.msg == "ParseException: boom"
        assert error.error is fact.error
        assert error.error_msg == "Error while parsing Example.java"
        assert error.cause_msg == PARSE_CAUSE_MSG
        assert error.file == "B.java"

    def test_implicit_context_used_as_cause(self) -> None:
        try:
            try:
                raise ValueError("Unexpected char at line 2, column 3.")
            except ValueError:
                raise RuntimeError("processing failed")  # noqa: B904
        except RuntimeError as e:
            fact = ProcessingErrorFact(msg="RuntimeError", error=e, file="C.java")
        error = ProcessingError.from_fact(fact)
        assert error.position == Position(line=2, column=3)

    def test_suppressed_context_is_not_a_cause(self) -> None:
        try:
            try:
                raise ValueError("hidden at line 2, column 3.")
            except ValueError:
                raise RuntimeError("processing failed") from None
        except RuntimeError as e:
            fact = ProcessingErrorFact(msg="RuntimeError", error=e, file="C.java")
        with pytest.raises(MissingCauseError):
            ProcessingError.from_fact(fact)

    def test_is_frozen(self) -> None:
        error = ProcessingError.from_fact(make_error_fact())
        with pytest.raises(AttributeError):
            error.cause_detail_msg = "other"  # type: ignore[misc]


class TestProcessingErrorMissingCause:
    """Wrapping errors without a usable cause fails loudly."""

    def test_no_cause_raises(self) -> None:
        fact = ProcessingErrorFact(msg="boom", error=make_chained_error(cause=None), file="A.java")
        with pytest.raises(MissingCauseError, match="has no cause") as exc_info:
            ProcessingError.from_fact(fact)
        assert exc_info.value.file == "A.java"

    def test_cause_without_message_raises(self) -> None:
        fact = ProcessingErrorFact(msg="boom", error=make_chained_error(cause=ValueError()), file="A.java")
        with pytest.raises(MissingCauseError, match="has no message"):
            ProcessingError.from_fact(fact)

    def test_missing_cause_is_checktree_error(self) -> None:
        fact = ProcessingErrorFact(msg="boom", error=make_chained_error(cause=None), file="A.java")
        with pytest.raises(CheckTreeError):
            ProcessingError.from_fact(fact)

    def test_direct_construction_with_empty_cause_raises(self) -> None:
        with pytest.raises(MissingCauseError):
            ProcessingError(fact=make_error_fact(), cause_detail_msg="", position=Position.unknown())
