"""Node storage for BinTreeLib.

Every node of a tree lives as a record in a single NodeStore owned by the
tree. Records point at each other by integer id rather than by object
reference, so ownership flows one way (tree -> store -> records) while
navigation still works in both directions.
"""

from dataclasses import dataclass
from typing import List, Optional

LEFT = "left"
RIGHT = "right"


def check_value(value) -> int:
    """Check that a node payload is an unsigned integer.

    Args:
        value: Candidate payload

    Returns:
        The value unchanged

    Raises:
        TypeError: If value is not an int (bool is rejected too)
        ValueError: If value is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Node values must be unsigned integers, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Node values must be unsigned integers, got {value}")
    return value


@dataclass
class NodeRecord:
    """Stored data for one node.

    Relations hold ids into the same store, never records.
    """
    value: int
    parent: Optional[int] = None
    left: Optional[int] = None
    right: Optional[int] = None

    def child(self, side: str) -> Optional[int]:
        return self.left if side == LEFT else self.right


class NodeStore:
    """Append-only arena of NodeRecords addressed by id.

    Ids are list positions. There is no removal, so an id stays valid for
    the lifetime of the store.
    """

    def __init__(self):
        self._records: List[NodeRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, node_id) -> bool:
        return isinstance(node_id, int) and 0 <= node_id < len(self._records)

    def create(self, value: int, parent: Optional[int] = None) -> int:
        """Allocate a new record.

        Args:
            value: Unsigned integer payload
            parent: Id of the parent record, None for a root

        Returns:
            Id of the new record
        """
        check_value(value)
        self._records.append(NodeRecord(value=value, parent=parent))
        return len(self._records) - 1

    def record(self, node_id: int) -> NodeRecord:
        """Return the record for an id.

        Raises:
            KeyError: If the id was never allocated by this store
        """
        if node_id not in self:
            raise KeyError(f"No node with id {node_id!r}")
        return self._records[node_id]

    def link_child(self, parent_id: int, side: str, child_id: int) -> Optional[int]:
        """Point a parent's child slot at an existing record.

        The child's own parent field is expected to be set already.

        Args:
            parent_id: Id of the record receiving the child
            side: LEFT or RIGHT
            child_id: Id of the child record

        Returns:
            Id previously held in the slot, or None
        """
        parent = self.record(parent_id)
        previous = parent.child(side)
        if side == LEFT:
            parent.left = child_id
        elif side == RIGHT:
            parent.right = child_id
        else:
            raise ValueError(f"Unknown child side: {side!r}")
        return previous
