"""Exceptions and warnings raised by BinTreeLib.

The core tree operations never fail on a well-formed tree. The classes here
cover the edges around it: invalid cursor configuration, trees whose
parent/child links disagree, and traversal guards.
"""


class BinTreeError(Exception):
    """Base class for all BinTreeLib errors."""
    pass


class ConfigurationError(BinTreeError):
    """Raised when a CursorConfig fails validation."""
    pass


class MalformedTreeError(BinTreeError):
    """Raised when parent/child back-references are inconsistent.

    Attributes:
        problems: Individual invariant violations that were found
    """

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class TraversalLimitError(BinTreeError):
    """Raised when a cursor reports more nodes than ``max_steps`` allows."""

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"Traversal exceeded max_steps={max_steps}")


class OrphanedChildWarning(UserWarning):
    """Emitted when attaching a child replaces an existing one.

    The displaced subtree stays in the node store but is no longer
    reachable from the root.
    """
    pass
