"""CLI runner for the animated Tower of Hanoi."""
from __future__ import annotations

import argparse
import contextlib
import logging
import re
import sys
from typing import Callable, Iterator, List, Optional, Sequence

from .colormap import load_colormap
from .config import AnimationConfig, load_config
from .errors import HanoiError, InputValidationError, InvariantViolationError, ResourceError, UsageError
from .logger import RunLogger
from .render import RENDER_MODES, make_renderer, render
from .solver import MoveCallback, expected_moves, plan_moves, solve
from .state import PuzzleState

logger = logging.getLogger(__name__)

INT_MAX = 2**31 - 1
PROMPT = "Enter the number of layers: "

RECURSION_MARGIN = 200
MAX_RECURSION_LIMIT = 50_000

_INTEGER = re.compile(r"\s*[+-]?\d+")


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(f"{message}\n{self.format_usage().rstrip()}")


def parse_num_layers(text: str) -> int:
    """Convert a layer count string to an int, raising InputValidationError if invalid."""
    if not _INTEGER.fullmatch(text):
        raise InputValidationError("num_layers must be an integer")
    n = int(text)
    if n <= 0:
        raise InputValidationError("num_layers must be greater than zero")
    if n > INT_MAX:
        raise InputValidationError(f"num_layers must be less than {INT_MAX}")
    return n


def prompt_num_layers(read_line: Callable[[str], str] = input) -> Optional[int]:
    """Ask for a layer count until a valid one is entered; None when input runs out."""
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            return None
        except OSError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None
        line = line.rstrip("\n")
        if not line:
            continue
        try:
            return parse_num_layers(line)
        except InputValidationError as exc:
            print(f"Error: {exc}")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="hanoi-lite", description="Animate a Tower of Hanoi solution in the terminal.")
    parser.add_argument("num_layers", nargs="?", help="Number of disks (prompted for when omitted)")
    parser.add_argument("--mode", choices=RENDER_MODES, default=None, help="Frame mode (default: append)")
    parser.add_argument("--delay", type=float, default=None, help="Seconds between in-place frames (default: 1.0)")
    parser.add_argument("--colormap", default=None, help="CSV file of r,g,b rows used to color the disks")
    parser.add_argument("--config", default=None, help="YAML file with animation settings")
    parser.add_argument("--trace", default=None, help="Write every frame to this JSON file")
    parser.add_argument("--plan", action="store_true", help="List the moves instead of animating them")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _chain(callbacks: List[MoveCallback]) -> MoveCallback:
    def on_move(state: PuzzleState) -> None:
        for callback in callbacks:
            callback(state)

    return on_move


def _print_plan(n: int) -> None:
    for k, (src, dest) in enumerate(plan_moves(n), start=1):
        print(f"Move {k}: {src} -> {dest}")
    print(f"Total moves: {expected_moves(n)}")


@contextlib.contextmanager
def recursion_headroom(num_layers: int) -> Iterator[None]:
    """Raise the recursion limit to fit ``num_layers``; exhaustion becomes a ResourceError."""
    previous = sys.getrecursionlimit()
    wanted = min(num_layers + RECURSION_MARGIN, MAX_RECURSION_LIMIT)
    if wanted > previous:
        sys.setrecursionlimit(wanted)
    try:
        yield
    except (RecursionError, MemoryError) as exc:
        raise ResourceError(f"not enough resources to solve {num_layers} layers ({type(exc).__name__})") from exc
    finally:
        sys.setrecursionlimit(previous)


def _write_trace(trace: RunLogger, trace_path: str) -> None:
    trace.to_json(trace_path)
    logger.info("wrote %d frames to %s", len(trace.events), trace_path)


def run(num_layers: int, config: AnimationConfig, trace_path: Optional[str] = None) -> PuzzleState:
    palette = load_colormap(config.colormap) if config.colormap else None
    state = PuzzleState.initialize(num_layers, palette)
    renderer = make_renderer(
        config.mode,
        color=config.use_color,
        spacing=config.spacing,
        delay=config.delay,
    )
    callbacks: List[MoveCallback] = [renderer]
    trace = RunLogger() if trace_path else None
    if trace is not None:
        callbacks.append(trace)
    on_move = _chain(callbacks)

    on_move(state)
    try:
        solve(state, on_move)
    except InvariantViolationError:
        # Flush what the poles look like so the failure can be diagnosed.
        sys.stdout.write(render(state, color=config.use_color, spacing=config.spacing))
        sys.stdout.flush()
        if trace is not None:
            try:
                _write_trace(trace, trace_path)
            except ResourceError as exc:
                logger.error("%s", exc)
        raise

    if trace is not None:
        _write_trace(trace, trace_path)
    logger.info("solved %d layers in %d moves", num_layers, state.moves)
    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if args.num_layers is not None:
            num_layers = parse_num_layers(args.num_layers)
        else:
            prompted = prompt_num_layers()
            if prompted is None:
                return 1
            num_layers = prompted
        print(f"num_layers: {num_layers}")

        config = load_config(args.config) if args.config else AnimationConfig()
        config = config.merged(mode=args.mode, delay=args.delay, colormap=args.colormap)

        with recursion_headroom(num_layers):
            if args.plan:
                _print_plan(num_layers)
            else:
                run(num_layers, config, args.trace)
    except HanoiError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
