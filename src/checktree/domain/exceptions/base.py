"""Base exceptions for checktree domain."""


class CheckTreeError(Exception):
    """Root exception for all checktree errors.

    All domain exceptions inherit from this.
    Allows catching all checktree-specific errors.
    """
