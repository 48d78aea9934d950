"""In-order cursor for BinTreeLib.

The cursor walks a tree in in-order sequence without recursion and without
an auxiliary stack. Its only state is the current position, the last
primitive move it made, and a one-shot ascent flag; "where to go next" is
rebuilt from those after every reported node.
"""

import sys
from enum import Enum
from typing import Optional

from ..config import AscentPolicy, CursorConfig
from ..errors import ConfigurationError, TraversalLimitError
from .node import NodeHandle


class Move(Enum):
    """Most recent primitive move applied to the cursor position."""
    NONE = "none"            # Nothing moved since creation
    STEPPED_LEFT = "left"    # position <- position.left
    STEPPED_RIGHT = "right"  # position <- position.right
    STEPPED_UP = "up"        # position <- position.parent


class InOrderCursor:
    """Movable in-order position over a binary tree.

    Each ``advance()`` returns the node at the current position and then
    prepares the position for the next call. Under AscentPolicy.LATCH the
    preparation follows this table:

        last move       condition            action
        STEPPED_LEFT    -                    step up
        STEPPED_UP      right child          step right, descend
        STEPPED_UP      no right child       finish
        STEPPED_RIGHT   left child           descend
        STEPPED_RIGHT   right child only     step right, descend
        STEPPED_RIGHT   leaf                 finish if already ascended,
                                             otherwise ascend to root
        NONE            -                    as STEPPED_UP

    The ascent flag is never cleared, so a walk that needs a second climb
    to the root stops early. AscentPolicy.SUCCESSOR replaces the table with
    a climb to the nearest ancestor entered from its left child, which is
    exact for every shape.

    A finished cursor stays finished; call ``Tree.cursor()`` again for a
    fresh walk.
    """

    def __init__(self, root: NodeHandle, config: Optional[CursorConfig] = None):
        """Position a cursor at the leftmost node below root.

        The walk covers only the subtree under root: climbs stop there,
        even when root has ancestors of its own.

        Args:
            root: Node the walk starts from and never climbs above
            config: Cursor configuration (defaults to CursorConfig())

        Raises:
            ConfigurationError: If the config does not validate
        """
        self.config = config if config is not None else CursorConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self._top: Optional[NodeHandle] = root
        self._position: Optional[NodeHandle] = root
        self._last_move = Move.NONE
        self._exhausted_ascent = False
        self._steps = 0

        self.descend_to_leftmost()

    # State

    @property
    def position(self) -> Optional[NodeHandle]:
        """Node the next ``advance()`` will report, None when finished."""
        return self._position

    @property
    def last_move(self) -> Move:
        return self._last_move

    @property
    def exhausted_ascent(self) -> bool:
        return self._exhausted_ascent

    @property
    def finished(self) -> bool:
        return self._position is None

    @property
    def steps(self) -> int:
        """Number of nodes reported so far."""
        return self._steps

    @property
    def policy(self) -> AscentPolicy:
        return self.config.ascent_policy

    # Primitive moves

    def _move_to(self, target: Optional[NodeHandle], move: Move) -> bool:
        if target is None:
            return False
        self._position = target
        self._last_move = move
        self._notify(move)
        return True

    def step_left(self) -> bool:
        """Move to the left child. No-op when there is none.

        Returns:
            True if the position changed
        """
        if self._position is None:
            return False
        return self._move_to(self._position.left, Move.STEPPED_LEFT)

    def step_right(self) -> bool:
        """Move to the right child. No-op when there is none."""
        if self._position is None:
            return False
        return self._move_to(self._position.right, Move.STEPPED_RIGHT)

    def step_up(self) -> bool:
        """Move to the parent. No-op at the root."""
        if self._position is None:
            return False
        return self._move_to(self._position.parent, Move.STEPPED_UP)

    # Compound moves

    def descend_to_leftmost(self) -> None:
        """Step left until the position has no left child."""
        while self._position is not None and self._position.has_left():
            self.step_left()

    def ascend_to_root(self) -> None:
        """Step up to the node the walk started from, then set the ascent flag."""
        if self._position is None:
            return
        while self._position != self._top and self._position.parent is not None:
            self.step_up()
        self._exhausted_ascent = True

    # Stepping

    def advance(self) -> Optional[NodeHandle]:
        """Report the current node and move on to the next one.

        Returns:
            Current node, or None once the walk is over

        Raises:
            TraversalLimitError: If max_steps nodes were already reported
        """
        current = self._position
        if current is None:
            return None

        max_steps = self.config.max_steps
        if max_steps is not None and self._steps >= max_steps:
            raise TraversalLimitError(max_steps)
        self._steps += 1

        if self.config.ascent_policy is AscentPolicy.SUCCESSOR:
            self._prepare_successor(current)
        else:
            self._prepare_latched(current)

        return current

    def _prepare_latched(self, current: NodeHandle) -> None:
        move = self._last_move

        if move is Move.STEPPED_LEFT:
            # Leftmost node of a subtree is done; its parent comes next
            self.step_up()

        elif move is Move.STEPPED_UP or move is Move.NONE:
            # NONE only happens at a start node without a left child
            if current.has_right():
                self.step_right()
                self.descend_to_leftmost()
            else:
                self._finish()

        elif move is Move.STEPPED_RIGHT:
            if current.has_left():
                self.descend_to_leftmost()
            elif current.has_right():
                self.step_right()
                self.descend_to_leftmost()
            elif self._exhausted_ascent:
                self._finish()
            else:
                self.ascend_to_root()

    def _prepare_successor(self, current: NodeHandle) -> None:
        if current.has_right():
            self.step_right()
            self.descend_to_leftmost()
            return

        # Climb out of every subtree we finished from the right
        child = current
        parent = current.parent
        while child != self._top and parent is not None and parent.right == child:
            self.step_up()
            child, parent = parent, parent.parent

        if child == self._top or parent is None:
            self._finish()
        else:
            self.step_up()

    def _finish(self) -> None:
        self._position = None
        self._top = None

    def _notify(self, move: Move) -> None:
        if self.config.on_move is not None:
            self.config.on_move(move, self._position)
        if self.config.verbose:
            print(f"cursor: {move.name} -> {self._position.value}", file=sys.stderr)

    # Iterator protocol

    def __iter__(self) -> 'InOrderCursor':
        return self

    def __next__(self) -> NodeHandle:
        node = self.advance()
        if node is None:
            raise StopIteration
        return node

    def __repr__(self) -> str:
        position = self._position.value if self._position is not None else None
        return (f"{self.__class__.__name__}(position={position}, "
                f"last_move={self._last_move.name}, "
                f"exhausted_ascent={self._exhausted_ascent})")
