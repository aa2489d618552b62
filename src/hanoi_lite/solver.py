"""Recursive Tower of Hanoi solver."""
from __future__ import annotations

from typing import Callable, Iterator, Optional, Tuple

from .errors import MissingSpareError
from .state import NUM_POLES, PuzzleState

MoveCallback = Callable[[PuzzleState], None]
Move = Tuple[int, int]


def expected_moves(n: int) -> int:
    return (1 << n) - 1


def get_spare(a: int, b: int) -> int:
    """Return the pole index that is neither ``a`` nor ``b``."""
    if a == b or not (0 <= a < NUM_POLES and 0 <= b < NUM_POLES):
        raise MissingSpareError(
            f"could not find spare with pole1 = {a}, pole2 = {b}, NUM_POLES = {NUM_POLES}"
        )
    return 3 - a - b


def _noop(_state: PuzzleState) -> None:
    return None


def move_stack(
    state: PuzzleState,
    size: int,
    src: int,
    dest: int,
    on_move: MoveCallback = _noop,
) -> None:
    """Move a stack of ``size`` disks from ``src`` to ``dest``, calling ``on_move`` after each move."""
    if size == 1:
        state.move_top_disk(src, dest)
        on_move(state)
        return
    spare = get_spare(src, dest)
    move_stack(state, size - 1, src, spare, on_move)
    move_stack(state, 1, src, dest, on_move)
    move_stack(state, size - 1, spare, dest, on_move)


def solve(state: PuzzleState, on_move: Optional[MoveCallback] = None) -> None:
    """Relocate every disk from pole 0 to the last pole."""
    move_stack(state, state.num_layers, 0, NUM_POLES - 1, on_move or _noop)


def plan_moves(n: int, src: int = 0, dest: int = NUM_POLES - 1) -> Iterator[Move]:
    """Yield the (src, dest) pairs ``solve`` performs, without touching any state."""
    if n <= 0:
        return
    if n == 1:
        yield (src, dest)
        return
    spare = get_spare(src, dest)
    yield from plan_moves(n - 1, src, spare)
    yield (src, dest)
    yield from plan_moves(n - 1, spare, dest)
