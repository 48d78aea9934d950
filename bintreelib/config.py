"""Configuration system for BinTreeLib.

This module defines how users specify cursor behaviour: which ascent policy
to use when a walk hits a dead end, how many nodes a walk may report, and
which diagnostics to emit along the way.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Callable, Any, List


class AscentPolicy(Enum):
    """How a cursor recovers after reporting a node with nowhere left to go.

    LATCH reproduces the original state table, including its one-shot
    ascent flag. SUCCESSOR climbs only as far as the next in-order
    ancestor and is exact for every tree shape.
    """
    LATCH = "latch"          # Climb to the root once, then stop at dead ends
    SUCCESSOR = "successor"  # Climb to the nearest ancestor entered from the left


@dataclass
class CursorConfig:
    """Complete configuration for an in-order cursor.

    Defaults reproduce the reference behaviour. Pass the config to
    ``Tree.cursor()`` or to the functions in ``bintreelib.api``.
    """

    # Dead-end recovery
    ascent_policy: AscentPolicy = AscentPolicy.LATCH

    # Guard against runaway walks
    max_steps: Optional[int] = None

    # Diagnostics
    on_move: Optional[Callable[[Any, Any], None]] = None  # (Move, NodeHandle)
    verbose: bool = False  # Print every primitive move to stderr

    # Convenience constructors for common configurations

    @classmethod
    def reference(cls) -> 'CursorConfig':
        """Create config matching the original state table.

        Returns:
            CursorConfig using the one-shot ascent latch
        """
        return cls(ascent_policy=AscentPolicy.LATCH)

    @classmethod
    def exact(cls, max_steps: Optional[int] = None) -> 'CursorConfig':
        """Create config that yields the exact in-order sequence.

        Args:
            max_steps: Optional cap on the number of reported nodes

        Returns:
            CursorConfig using successor ascent
        """
        return cls(ascent_policy=AscentPolicy.SUCCESSOR, max_steps=max_steps)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.ascent_policy, AscentPolicy):
            errors.append(f"ascent_policy must be an AscentPolicy, got {self.ascent_policy!r}")

        if self.max_steps is not None:
            if isinstance(self.max_steps, bool) or not isinstance(self.max_steps, int):
                errors.append("max_steps must be an integer")
            elif self.max_steps <= 0:
                errors.append("max_steps must be positive")

        if self.on_move is not None and not callable(self.on_move):
            errors.append("on_move must be callable")

        return errors


def parse_policy(policy) -> AscentPolicy:
    """Parse an ascent policy from string or enum.

    Args:
        policy: Policy as enum or string

    Returns:
        AscentPolicy enum value

    Raises:
        ValueError: If the name is not recognised
    """
    if isinstance(policy, AscentPolicy):
        return policy

    policy_map = {
        'latch': AscentPolicy.LATCH,
        'reference': AscentPolicy.LATCH,
        'successor': AscentPolicy.SUCCESSOR,
        'exact': AscentPolicy.SUCCESSOR,
    }

    policy_lower = policy.lower() if isinstance(policy, str) else str(policy)
    if policy_lower in policy_map:
        return policy_map[policy_lower]

    raise ValueError(f"Unknown ascent policy: {policy}")
