"""Domain exceptions."""

from checktree.domain.exceptions.base import CheckTreeError
from checktree.domain.exceptions.processing import MissingCauseError
from checktree.domain.exceptions.structure import StructuralMisuseError

__all__ = [
    "CheckTreeError",
    "MissingCauseError",
    "StructuralMisuseError",
]
