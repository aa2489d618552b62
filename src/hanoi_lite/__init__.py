# src/hanoi_lite/__init__.py
"""
Animated Tower of Hanoi for the terminal.

The pole state, the recursive solver and the renderer are independent: the
solver reports each move through a callback, and the renderers are such
callbacks.
"""

from .errors import (
    HanoiError, UsageError, InputValidationError, ResourceError,
    InvariantViolationError, EmptySourceError, DestinationFullError,
    IllegalMoveError, MissingSpareError,
)
from .state import NUM_POLES, Disk, Pole, PuzzleState
from .solver import expected_moves, get_spare, move_stack, plan_moves, solve
from .render import AppendRenderer, InPlaceRenderer, make_renderer, render
from .logger import RunLogger

__all__ = [
    # State
    "NUM_POLES", "Disk", "Pole", "PuzzleState",
    # Solver
    "expected_moves", "get_spare", "move_stack", "plan_moves", "solve",
    # Rendering
    "AppendRenderer", "InPlaceRenderer", "make_renderer", "render", "RunLogger",
    # Errors
    "HanoiError", "UsageError", "InputValidationError", "ResourceError",
    "InvariantViolationError", "EmptySourceError", "DestinationFullError",
    "IllegalMoveError", "MissingSpareError",
]
