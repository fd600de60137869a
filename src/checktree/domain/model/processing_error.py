"""Processing error entity wrapped by error leaf nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from checktree.domain.exceptions import MissingCauseError
from checktree.domain.model.position import Position

if TYPE_CHECKING:
    from checktree.domain.model.facts import ProcessingErrorFact


def _cause_of(error: BaseException) -> BaseException | None:
    """Explicit cause, or the implicit context unless suppressed."""
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


@dataclass(frozen=True, slots=True)
class ProcessingError:
    """Processing error with derived cause text and position.

    Computed once from the fact. Use from_fact() to build it.

    Attributes:
        fact: Original processing error fact
        cause_detail_msg: Message of the error's cause
        position: Position parsed from cause_detail_msg, (0, 0) if absent
    """

    fact: ProcessingErrorFact
    cause_detail_msg: str
    position: Position

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.cause_detail_msg:
            raise MissingCauseError(self.fact.file, "cause message must not be empty")

    @classmethod
    def from_fact(cls, fact: ProcessingErrorFact) -> ProcessingError:
        """Derive cause message and position from fact.

        Raises:
            MissingCauseError: Error has no cause or the cause has no message.
        """
        cause = _cause_of(fact.error)
        if cause is None:
            raise MissingCauseError(fact.file, f"{type(fact.error).__name__} has no cause")
        cause_msg = str(cause)
        if not cause_msg:
            raise MissingCauseError(fact.file, f"cause {type(cause).__name__} has no message")
        return cls(
            fact=fact,
            cause_detail_msg=cause_msg,
            position=Position.from_message(cause_msg),
        )

    @property
    def msg(self) -> str:
        """Short message: error type and detail."""
        return self.fact.msg

    @property
    def error_msg(self) -> str:
        """Detail message of the error itself (may be empty)."""
        return str(self.fact.error)

    @property
    def cause_msg(self) -> str:
        """Detail message of the cause."""
        return self.cause_detail_msg

    @property
    def error(self) -> BaseException:
        """The exception raised while processing."""
        return self.fact.error

    @property
    def file(self) -> str:
        """File during which the error occurred."""
        return self.fact.file

    @property
    def position_text(self) -> str:
        """Position text to render, e.g. "(42, 7) "."""
        return self.position.text

    @property
    def begin_line(self) -> int:
        return self.position.line

    @property
    def begin_column(self) -> int:
        return self.position.column
