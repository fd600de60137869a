"""Domain enumerations."""

from enum import Enum, auto


class BranchKind(Enum):
    """Grouping a branch node stands for."""

    RULE_SET = auto()  # one per rule set under the root
    RULE = auto()  # violations of one rule
    PROCESSING_ERRORS = auto()  # files that failed to process
    GROUP = auto()  # anything else


class StyleHint(Enum):
    """Styling hint attached to a rendered text fragment.

    The rendering surface decides how a hint looks.
    """

    REGULAR = auto()
    GRAYED = auto()
    ERROR = auto()
    LINK = auto()
