"""Text rendering of the puzzle state.

``render`` is a pure function of the state. The frame renderers wrap it and
are handed to the solver as the per-move callback.
"""
from __future__ import annotations

import sys
import time
from typing import Callable, List, Optional, TextIO

from .errors import UsageError
from .solver import expected_moves
from .state import Disk, Pole, PuzzleState

EMPTY = " "
DISK = "#"
ROD = "|"
SPACE_BETWEEN_POLES = 3

CSI = "\x1b["
RESET = f"{CSI}0m"
CURSOR_UP_CLEAR = f"{CSI}1A{CSI}2K"

RENDER_MODES = ("append", "inplace")


def colorize(text: str, disk: Disk) -> str:
    if disk.color is None:
        return text
    r, g, b = disk.color
    return f"{CSI}38;2;{r};{g};{b}m{text}{RESET}"


def render_layer_pole(pole: Pole, num_layers: int, layer: int, color: bool = False) -> str:
    """One pole at one layer, centered in a field of width 2 * num_layers - 1."""
    if len(pole) <= layer:
        pad = EMPTY * (num_layers - 1)
        return pad + ROD + pad
    disk = pole[layer]
    pad = EMPTY * (num_layers - disk.size)
    glyph = DISK * (2 * disk.size - 1)
    if color:
        glyph = colorize(glyph, disk)
    return pad + glyph + pad


def render_layer(state: PuzzleState, layer: int, color: bool = False, spacing: int = SPACE_BETWEEN_POLES) -> str:
    gap = EMPTY * spacing
    return gap.join(render_layer_pole(pole, state.num_layers, layer, color) for pole in state.poles)


def render(state: PuzzleState, *, color: bool = False, spacing: int = SPACE_BETWEEN_POLES) -> str:
    """Render every layer, top row first, each row terminated by a newline."""
    rows: List[str] = []
    for layer in range(state.num_layers - 1, -1, -1):
        rows.append(render_layer(state, layer, color, spacing) + "\n")
    return "".join(rows)


class AppendRenderer:
    """Prints each frame as a new block followed by two blank lines."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = False, spacing: int = SPACE_BETWEEN_POLES):
        self.stream = stream or sys.stdout
        self.color = color
        self.spacing = spacing
        self.frames = 0

    def __call__(self, state: PuzzleState) -> None:
        self.stream.write(render(state, color=self.color, spacing=self.spacing))
        self.stream.write("\n\n")
        self.stream.flush()
        self.frames += 1


class InPlaceRenderer:
    """Redraws the frame over the previous one and shows the move counter.

    Waits ``delay`` seconds before every frame after the first.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        color: bool = False,
        spacing: int = SPACE_BETWEEN_POLES,
        delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.stream = stream or sys.stdout
        self.color = color
        self.spacing = spacing
        self.delay = delay
        self.sleep = sleep
        self.frames = 0
        self._drawn_lines = 0

    def __call__(self, state: PuzzleState) -> None:
        if self.frames > 0:
            if self.delay > 0:
                self.sleep(self.delay)
            self.stream.write(CURSOR_UP_CLEAR * self._drawn_lines)
        body = render(state, color=self.color, spacing=self.spacing)
        status = f"Move {state.moves}/{expected_moves(state.num_layers)}\n"
        self.stream.write(body + status)
        self.stream.flush()
        self._drawn_lines = state.num_layers + 1
        self.frames += 1


def make_renderer(
    mode: str,
    stream: Optional[TextIO] = None,
    color: bool = False,
    spacing: int = SPACE_BETWEEN_POLES,
    delay: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
):
    if mode == "append":
        return AppendRenderer(stream, color=color, spacing=spacing)
    if mode == "inplace":
        return InPlaceRenderer(stream, color=color, spacing=spacing, delay=delay, sleep=sleep)
    raise UsageError(f"unknown render mode '{mode}' (expected one of {', '.join(RENDER_MODES)})")
