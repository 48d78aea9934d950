"""NodeHandle abstraction for BinTreeLib.

A NodeHandle is intentionally kept tiny - it is a (store, id) pair, not a
copy of the node's data. Any number of handles may address the same node;
reads and writes all go through the shared NodeStore, so every handle sees
the same state.
"""

import warnings
from typing import Any, Dict, Optional

from ..errors import OrphanedChildWarning
from .store import NodeStore, LEFT, RIGHT


class NodeHandle:
    """Handle to one node of a binary tree.

    Handles keep their store alive, but the store never holds handles, so
    dropping the tree and every outstanding handle frees all nodes through
    ordinary reference counting.
    """

    __slots__ = ('_store', '_id')

    def __init__(self, store: NodeStore, node_id: int):
        """Initialize a handle.

        Args:
            store: Store holding the node
            node_id: Id of the node inside the store
        """
        self._store = store
        self._id = node_id

    def _wrap(self, node_id: Optional[int]) -> Optional['NodeHandle']:
        if node_id is None:
            return None
        return NodeHandle(self._store, node_id)

    @property
    def node_id(self) -> int:
        """Id of the node inside its store."""
        return self._id

    @property
    def value(self) -> int:
        """Unsigned integer payload."""
        return self._store.record(self._id).value

    @property
    def parent(self) -> Optional['NodeHandle']:
        """Handle to the parent, or None for the root."""
        return self._wrap(self._store.record(self._id).parent)

    @property
    def left(self) -> Optional['NodeHandle']:
        """Handle to the left child, or None."""
        return self._wrap(self._store.record(self._id).left)

    @property
    def right(self) -> Optional['NodeHandle']:
        """Handle to the right child, or None."""
        return self._wrap(self._store.record(self._id).right)

    def has_left(self) -> bool:
        return self._store.record(self._id).left is not None

    def has_right(self) -> bool:
        return self._store.record(self._id).right is not None

    def is_leaf(self) -> bool:
        """Check if this node is a leaf (has no children).

        Returns:
            bool: True if both child slots are empty
        """
        return not self.has_left() and not self.has_right()

    def is_root(self) -> bool:
        return self._store.record(self._id).parent is None

    def depth(self) -> int:
        """Calculate the depth of this node by walking up to the root.

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = self._store.record(self._id)
        while current.parent is not None:
            depth += 1
            current = self._store.record(current.parent)
        return depth

    # Growing the tree

    def _create_child(self, value: int) -> 'NodeHandle':
        # Parent link only; the caller wires the slot before returning.
        return NodeHandle(self._store, self._store.create(value, parent=self._id))

    def _attach(self, side: str, value: int) -> 'NodeHandle':
        child = self._create_child(value)
        previous = self._store.link_child(self._id, side, child.node_id)
        if previous is not None:
            warnings.warn(
                f"Attaching {value} as {side} child of {self.value} orphans "
                f"node {self._store.record(previous).value} (id {previous})",
                OrphanedChildWarning,
                stacklevel=3
            )
        return child

    def attach_left(self, value: int) -> 'NodeHandle':
        """Attach a new left child.

        Both the child's parent link and this node's left slot are set
        before the handle is returned, so the new child can be used
        straight away to attach further nodes below it.

        Args:
            value: Unsigned integer payload for the child

        Returns:
            Handle to the new child

        Example:
            >>> tree = Tree(8)
            >>> tree.attach_left(3).attach_right(6).attach_left(4)
        """
        return self._attach(LEFT, value)

    def attach_right(self, value: int) -> 'NodeHandle':
        """Attach a new right child.

        Args:
            value: Unsigned integer payload for the child

        Returns:
            Handle to the new child
        """
        return self._attach(RIGHT, value)

    # Identity

    def identifier(self) -> str:
        """Return a unique identifier for this node within its tree.

        Returns:
            str: Stable identifier derived from the node id
        """
        return f"node:{self._id}"

    def metadata(self) -> Dict[str, Any]:
        """Return basic metadata about this node.

        Returns:
            Dict[str, Any]: value, is_leaf, is_root and depth
        """
        return {
            'value': self.value,
            'is_leaf': self.is_leaf(),
            'is_root': self.is_root(),
            'depth': self.depth(),
        }

    def __str__(self) -> str:
        """String representation is the node value."""
        return str(self.value)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(id={self._id}, value={self.value})"

    def __eq__(self, other: object) -> bool:
        """Handles are equal if they address the same node of the same store."""
        if not isinstance(other, NodeHandle):
            return NotImplemented
        return self._store is other._store and self._id == other._id

    def __hash__(self) -> int:
        """Hash based on store identity and node id."""
        return hash((id(self._store), self._id))
