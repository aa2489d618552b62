"""Error taxonomy for hanoi-lite.

Library code raises these; only the CLI turns them into exit codes.
Invariant violations signal a solver defect rather than bad input and are
always fatal.
"""

from __future__ import annotations


class HanoiError(RuntimeError):
    """Base class for every error raised by hanoi-lite."""


class UsageError(HanoiError):
    """Raised for bad command line arguments or options."""


class InputValidationError(HanoiError):
    """Raised when a layer count is not a positive integer in range."""


class ResourceError(HanoiError):
    """Raised when a colormap or config file is missing or malformed."""


class InvariantViolationError(HanoiError):
    """Raised when the puzzle state would become inconsistent."""


class EmptySourceError(InvariantViolationError):
    """Raised when moving from a pole that holds no disks."""


class DestinationFullError(InvariantViolationError):
    """Raised when moving onto a pole already at capacity."""


class IllegalMoveError(InvariantViolationError):
    """Raised when a disk ends up on top of a smaller disk."""


class MissingSpareError(InvariantViolationError):
    """Raised when no spare pole exists for a pair of pole indices."""
