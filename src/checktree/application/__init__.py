"""Application layer: node factory, tree builder, session."""

from checktree.application.builder import BuildConfig, ResultTreeBuilder
from checktree.application.factory import NodeFactory
from checktree.application.session import ResultTreeSession

__all__ = [
    "BuildConfig",
    "NodeFactory",
    "ResultTreeBuilder",
    "ResultTreeSession",
]
