"""Processing error exceptions."""

from __future__ import annotations

from checktree.domain.exceptions.base import CheckTreeError


class MissingCauseError(CheckTreeError):
    """Processing error fact cannot be wrapped.

    Raised when the reported error has no cause, or the cause carries
    no message. Without it neither position nor cause text exist.

    Attributes:
        file: File the processing error was reported for
        reason: What is missing
    """

    def __init__(self, file: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.file = file
        self.reason = reason
        super().__init__(f"Cannot wrap processing error for {file or '<unknown file>'}: {reason}")
