import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for target in (PROJECT_ROOT / "src", PROJECT_ROOT):
    target_str = str(target)
    if target_str not in sys.path:
        sys.path.append(target_str)

from hanoi_lite.errors import (  # type: ignore  # pylint: disable=wrong-import-position
    DestinationFullError,
    EmptySourceError,
    IllegalMoveError,
    InputValidationError,
    ResourceError,
)
from hanoi_lite.state import NUM_POLES, Disk, Pole, PuzzleState, palette_index  # type: ignore  # pylint: disable=wrong-import-position


def test_initialize_loads_source_pole():
    state = PuzzleState.initialize(4)
    assert len(state.poles) == NUM_POLES
    assert state.snapshot() == [[4, 3, 2, 1], [], []]
    assert all(pole.capacity == 4 for pole in state.poles)
    assert state.moves == 0
    assert not state.is_solved()


def test_initialize_rejects_non_positive():
    with pytest.raises(InputValidationError):
        PuzzleState.initialize(0)


def test_move_top_disk_moves_smallest():
    state = PuzzleState.initialize(3)
    disk = state.move_top_disk(0, 2)
    assert disk.size == 1
    assert state.snapshot() == [[3, 2], [], [1]]
    assert state.moves == 1


def test_move_from_empty_pole_fails_without_mutation():
    state = PuzzleState.initialize(2)
    with pytest.raises(EmptySourceError):
        state.move_top_disk(1, 2)
    assert state.snapshot() == [[2, 1], [], []]
    assert state.moves == 0


def test_move_onto_full_pole_fails():
    state = PuzzleState(num_layers=1, poles=[Pole(1, [Disk(1)]), Pole(1, [Disk(1)]), Pole(1)])
    with pytest.raises(DestinationFullError):
        state.move_top_disk(0, 1)


def test_illegal_move_is_detected():
    state = PuzzleState.initialize(2)
    state.move_top_disk(0, 1)
    with pytest.raises(IllegalMoveError, match="illegal move"):
        state.move_top_disk(0, 1)


def test_pole_push_pop_bounds():
    pole = Pole(capacity=1)
    with pytest.raises(EmptySourceError):
        pole.pop()
    pole.push(Disk(1))
    assert pole.top() == Disk(1)
    assert pole.is_full()
    with pytest.raises(DestinationFullError):
        pole.push(Disk(2))


def test_palette_spread_across_sizes():
    palette = np.array([[0, 0, 0], [100, 0, 0], [200, 0, 0], [255, 0, 0]], dtype=np.uint8)
    state = PuzzleState.initialize(3, palette)
    colors = {disk.size: disk.color for disk in state.poles[0].disks}
    # indices 0, 2 and 4 (clamped to 3)
    assert colors == {1: (0, 0, 0), 2: (200, 0, 0), 3: (255, 0, 0)}


def test_palette_single_layer_uses_first_entry():
    state = PuzzleState.initialize(1, [(1, 2, 3), (4, 5, 6)])
    assert state.poles[0].top().color == (1, 2, 3)


def test_palette_index_clamps():
    assert palette_index(0, 5, 10) == 0
    assert palette_index(4, 5, 10) == 9
    assert palette_index(2, 5, 10) == 5


def test_empty_palette_rejected():
    with pytest.raises(ResourceError):
        PuzzleState.initialize(3, np.zeros((0, 3)))
