"""Tree aggregate for BinTreeLib.

A Tree owns the NodeStore holding its nodes and the id of the root. It is
the entry point for growing the tree and for both traversal styles.
"""

from typing import List, Optional, TextIO

from ..config import CursorConfig
from ..errors import MalformedTreeError
from .cursor import InOrderCursor
from .node import NodeHandle
from .store import NodeStore
from .traverser import walk_in_order, iter_in_order_with_depth, print_in_order


class Tree:
    """Binary tree with parent links, grown by attaching children.

    Example:
        >>> tree = Tree(8)
        >>> node3 = tree.attach_left(3)
        >>> leaf = node3.attach_left(1)
        >>> leaf = tree.attach_right(10)
        >>> [node.value for node in tree.cursor(CursorConfig.exact())]
        [1, 3, 8, 10]
    """

    def __init__(self, root_value: int):
        """Create a tree whose root is a fresh leaf.

        Args:
            root_value: Unsigned integer payload of the root
        """
        self._store = NodeStore()
        self._root_id = self._store.create(root_value)

    @classmethod
    def new(cls, root_value: int) -> 'Tree':
        """Alternate constructor, same as ``Tree(root_value)``."""
        return cls(root_value)

    @property
    def root(self) -> NodeHandle:
        return NodeHandle(self._store, self._root_id)

    def attach_left(self, value: int) -> NodeHandle:
        """Attach a left child to the root.

        Returns:
            Handle to the new child
        """
        return self.root.attach_left(value)

    def attach_right(self, value: int) -> NodeHandle:
        """Attach a right child to the root.

        Returns:
            Handle to the new child
        """
        return self.root.attach_right(value)

    # Traversal

    def cursor(self, config: Optional[CursorConfig] = None) -> InOrderCursor:
        """Create a cursor at the start of the in-order sequence.

        Args:
            config: Cursor configuration (defaults to CursorConfig())

        Returns:
            New InOrderCursor positioned at the root's leftmost descendant
        """
        return InOrderCursor(self.root, config)

    def traverse_in_order_print(self, file: Optional[TextIO] = None, sep: str = ", ") -> None:
        """Print every value in in-order sequence using plain recursion.

        Args:
            file: Output stream (default sys.stdout)
            sep: Separator between values
        """
        print_in_order(self.root, file=file, sep=sep)

    def in_order_values(self) -> List[int]:
        """Return the values of the recursive in-order walk."""
        return [node.value for node in walk_in_order(self.root)]

    def __len__(self) -> int:
        """Number of nodes reachable from the root."""
        return sum(1 for _ in iter_in_order_with_depth(self.root))

    # Invariants

    def validate_invariants(self) -> List[str]:
        """Check parent/child links of every node reachable from the root.

        Nodes orphaned by re-attaching a child slot are not reachable and
        are not checked.

        Returns:
            List of problems (empty if the tree is well-formed)
        """
        problems = []
        root = self.root

        if root.parent is not None:
            problems.append(f"root {root.value} has parent {root.parent.value}")

        for node, _ in iter_in_order_with_depth(root):
            for side, child in (("left", node.left), ("right", node.right)):
                if child is None:
                    continue
                if child.parent != node:
                    found = child.parent.value if child.parent is not None else None
                    problems.append(
                        f"{side} child {child.value} of {node.value} "
                        f"has parent {found}"
                    )
            if node != root and node.parent is None:
                problems.append(f"non-root node {node.value} has no parent")

        return problems

    def check_invariants(self) -> None:
        """Raise if ``validate_invariants()`` finds any problem.

        Raises:
            MalformedTreeError: With every problem found
        """
        problems = self.validate_invariants()
        if problems:
            raise MalformedTreeError(problems)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root.value}, nodes={len(self)})"
