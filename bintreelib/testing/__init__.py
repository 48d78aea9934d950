"""Testing utilities for BinTreeLib consumers."""

from .fixtures import (
    REFERENCE_IN_ORDER,
    SECOND_ASCENT_IN_ORDER,
    MoveRecorder,
    build_random_tree,
    build_reference_tree,
    build_second_ascent_tree,
)

__all__ = [
    'REFERENCE_IN_ORDER',
    'SECOND_ASCENT_IN_ORDER',
    'MoveRecorder',
    'build_random_tree',
    'build_reference_tree',
    'build_second_ascent_tree',
]
