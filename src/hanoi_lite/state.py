"""Pole and disk state for the Tower of Hanoi animation."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import (
    DestinationFullError,
    EmptySourceError,
    IllegalMoveError,
    InputValidationError,
    ResourceError,
)

logger = logging.getLogger(__name__)

NUM_POLES = 3

RGB = Tuple[int, int, int]
Palette = Union[np.ndarray, Sequence[Sequence[int]]]


@dataclass(frozen=True)
class Disk:
    size: int
    color: Optional[RGB] = None


@dataclass
class Pole:
    """Fixed-capacity stack of disks, bottom first."""

    capacity: int
    disks: List[Disk] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.disks)

    def __getitem__(self, layer: int) -> Disk:
        return self.disks[layer]

    def is_full(self) -> bool:
        return len(self.disks) >= self.capacity

    def top(self) -> Optional[Disk]:
        return self.disks[-1] if self.disks else None

    def push(self, disk: Disk) -> None:
        if self.is_full():
            raise DestinationFullError(f"pole is full (capacity {self.capacity})")
        self.disks.append(disk)

    def pop(self) -> Disk:
        if not self.disks:
            raise EmptySourceError("pole is empty")
        return self.disks.pop()

    def sizes(self) -> List[int]:
        return [disk.size for disk in self.disks]


def palette_index(i: int, num_layers: int, palette_length: int) -> int:
    """Index into a palette of ``palette_length`` colors for the i-th smallest disk."""
    if num_layers == 1:
        return 0
    return min(i * palette_length // (num_layers - 1), palette_length - 1)


def _disk_colors(num_layers: int, palette: Optional[Palette]) -> List[Optional[RGB]]:
    if palette is None:
        return [None] * num_layers
    table = np.asarray(palette, dtype=np.int64)
    if table.ndim != 2 or table.shape[0] == 0 or table.shape[1] != 3:
        raise ResourceError("palette must be a non-empty table of r,g,b rows")
    colors: List[Optional[RGB]] = []
    for i in range(num_layers):
        r, g, b = table[palette_index(i, num_layers, table.shape[0])]
        colors.append((int(r), int(g), int(b)))
    return colors


@dataclass
class PuzzleState:
    """Three poles plus the running move counter.

    Only ``move_top_disk`` mutates the poles once the state is initialized.
    """

    num_layers: int
    poles: List[Pole]
    moves: int = 0

    @classmethod
    def initialize(cls, num_layers: int, palette: Optional[Palette] = None) -> "PuzzleState":
        if num_layers < 1:
            raise InputValidationError("num_layers must be greater than zero")
        colors = _disk_colors(num_layers, palette)
        poles = [Pole(capacity=num_layers) for _ in range(NUM_POLES)]
        # Pole 0 starts with every disk, largest at the bottom.
        for size in range(num_layers, 0, -1):
            poles[0].push(Disk(size=size, color=colors[size - 1]))
        logger.debug("initialized %d poles with %d layers", NUM_POLES, num_layers)
        return cls(num_layers=num_layers, poles=poles)

    def move_top_disk(self, src: int, dest: int) -> Disk:
        """Move the top disk of ``src`` onto ``dest`` and return it."""
        source = self.poles[src]
        target = self.poles[dest]
        if not source:
            raise EmptySourceError(f"src pole {src} is empty")
        if target.is_full():
            raise DestinationFullError(f"dest pole {dest} is full")
        disk = source.pop()
        target.push(disk)
        self.moves += 1

        # Should never trigger with a correct solver.
        if len(target) > 1 and disk.size > target[len(target) - 2].size:
            raise IllegalMoveError(
                f"attempted illegal move: disk {disk.size} placed on disk "
                f"{target[len(target) - 2].size} (pole {src} -> {dest})"
            )
        logger.debug("move %d: disk %d from %d to %d", self.moves, disk.size, src, dest)
        return disk

    def total_disks(self) -> int:
        return sum(len(pole) for pole in self.poles)

    def is_solved(self) -> bool:
        return all(not pole for pole in self.poles[:-1]) and len(self.poles[-1]) == self.num_layers

    def snapshot(self) -> List[List[int]]:
        return [pole.sizes() for pole in self.poles]
