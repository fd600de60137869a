"""Source position value object and the error message position parser.

Parser exceptions from the analysis engine put the position in free text:

    Encountered unexpected token at line 42, column 7. Was expecting ...

The format is not guaranteed, so parsing is best-effort and never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LINE_MARKER = " at line "
COLUMN_MARKER = ", column "
COLUMN_END = "."


@dataclass(frozen=True, slots=True)
class Position:
    """One-based (line, column) pair in a source file.

    (0, 0) means the position is unknown.

    Attributes:
        line: Line number (1-based, 0 = unknown)
        column: Column number (1-based, 0 = unknown)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    @property
    def is_known(self) -> bool:
        """Check if position points at a real line."""
        return self.line > 0

    @property
    def text(self) -> str:
        """Position text shown in front of leaf labels."""
        return f"({self.line}, {self.column}) "

    @classmethod
    def unknown(cls) -> Position:
        """Create the (0, 0) position."""
        return cls(line=0, column=0)

    @classmethod
    def from_message(cls, message: str) -> Position:
        """Parse position from message, falling back to (0, 0)."""
        parsed = parse_position(message)
        return parsed if parsed is not None else cls.unknown()


def parse_position(message: str) -> Position | None:
    """Extract the position from a parser exception message.

    Line text sits between " at line " and ", column ", column text between
    ", column " and the next ".". Both must be plain decimal digits.

    Args:
        message: Free text exception message

    Returns:
        Parsed Position, or None when markers are missing or malformed.
    """
    line_pos = message.find(LINE_MARKER)
    if line_pos < 0:
        logger.debug("No line marker in message: %r", message)
        return None

    line_start = line_pos + len(LINE_MARKER)
    column_pos = message.find(COLUMN_MARKER, line_start)
    if column_pos < 0:
        logger.debug("No column marker after line marker in message: %r", message)
        return None

    column_start = column_pos + len(COLUMN_MARKER)
    column_end = message.find(COLUMN_END, column_start)
    if column_end < 0:
        column_end = len(message)

    line_text = message[line_start:column_pos]
    column_text = message[column_start:column_end]
    if not (line_text.isdecimal() and column_text.isdecimal()):
        logger.debug("Malformed position %r, %r in message: %r", line_text, column_text, message)
        return None

    return Position(line=int(line_text), column=int(column_text))
