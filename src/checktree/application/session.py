"""Result tree session: owns the tree of the latest analysis run."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from checktree.application.builder import ResultTreeBuilder

if TYPE_CHECKING:
    from checktree.domain.model.analysis_run import AnalysisRun
    from checktree.domain.model.nodes import RootNode
    from checktree.domain.ports import HostPanel

logger = logging.getLogger(__name__)


class ResultTreeSession:
    """Holds the current result tree and replaces it per run.

    A new run never mutates the current tree: the new tree is built
    completely, then swapped in. Readers see the old root or the new one.
    """

    def __init__(
        self,
        builder: ResultTreeBuilder | None = None,
        host_panel: HostPanel | None = None,
    ) -> None:
        """Initialize session.

        Args:
            builder: Tree builder. Uses default builder if None.
            host_panel: Panel given to every root this session builds.
        """
        self._builder = builder or ResultTreeBuilder()
        self._host_panel = host_panel
        self._root: RootNode | None = None
        self._runs = 0
        self._lock = threading.Lock()

    @property
    def root(self) -> RootNode | None:
        """Root of the latest tree, None before the first run."""
        return self._root

    @property
    def runs(self) -> int:
        """Number of trees built by this session."""
        return self._runs

    def rebuild(self, run: AnalysisRun) -> RootNode:
        """Build tree for run and make it current.

        Args:
            run: Facts of the new analysis run

        Returns:
            The new root.

        Raises:
            MissingCauseError: Propagated from the builder; current tree is kept.
        """
        new_root = self._builder.build(run, self._host_panel)
        with self._lock:
            self._root = new_root
            self._runs += 1
            runs = self._runs
        logger.debug("Swapped result tree root (run %d)", runs)
        return new_root

    def clear(self) -> None:
        """Drop the current tree."""
        with self._lock:
            self._root = None
