"""checktree domain layer.

Pure tree model with no external dependencies.
Only imports: typing, dataclasses, enum, logging, threading, weakref, collections.abc
"""

from checktree.domain.exceptions import (
    CheckTreeError,
    MissingCauseError,
    StructuralMisuseError,
)
from checktree.domain.model import (
    AnalysisRun,
    BranchKind,
    BranchNode,
    Counts,
    ErrorNode,
    Position,
    ProcessingError,
    ProcessingErrorFact,
    ResultNode,
    RootNode,
    StyleHint,
    SuppressedNode,
    SuppressedViolationFact,
    ViolationFact,
    ViolationNode,
)
from checktree.domain.ports import HostPanel, RenderSurface

__all__ = [
    # Exceptions
    "CheckTreeError",
    "MissingCauseError",
    "StructuralMisuseError",
    # Enums
    "BranchKind",
    "StyleHint",
    # Value objects
    "Counts",
    "Position",
    # Facts
    "AnalysisRun",
    "ViolationFact",
    "SuppressedViolationFact",
    "ProcessingErrorFact",
    "ProcessingError",
    # Nodes
    "RootNode",
    "BranchNode",
    "ViolationNode",
    "SuppressedNode",
    "ErrorNode",
    "ResultNode",
    # Ports
    "HostPanel",
    "RenderSurface",
]
