"""checktree - navigable result tree for static analysis runs."""

__version__ = "0.1.0"

from checktree.application import (
    BuildConfig,
    NodeFactory,
    ResultTreeBuilder,
    ResultTreeSession,
)
from checktree.domain import (
    AnalysisRun,
    BranchKind,
    BranchNode,
    CheckTreeError,
    Counts,
    ErrorNode,
    MissingCauseError,
    Position,
    ProcessingError,
    ProcessingErrorFact,
    RootNode,
    StructuralMisuseError,
    StyleHint,
    SuppressedNode,
    SuppressedViolationFact,
    ViolationFact,
    ViolationNode,
)
from checktree.presentation import ConsoleConfig, ConsoleTreeReporter

__all__ = [
    "__version__",
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
    "BranchKind",
    "StyleHint",
    "Counts",
    "Position",
    # Building
    "NodeFactory",
    "ResultTreeBuilder",
    "BuildConfig",
    "ResultTreeSession",
    # Output
    "ConsoleConfig",
    "ConsoleTreeReporter",
    # Exceptions
    "CheckTreeError",
    "MissingCauseError",
    "StructuralMisuseError",
]
