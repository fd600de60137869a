"""Presentation layer: console output of result trees."""

from checktree.presentation.console import ConsoleConfig, ConsoleTreeReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleTreeReporter",
]
