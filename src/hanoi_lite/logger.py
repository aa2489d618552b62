import json
from typing import List, Dict, Any, Optional

from .errors import ResourceError
from .state import PuzzleState


class RunLogger:
    """
    Collects per-move frames for replay/visualization.

    Frame schema (all optional except tick/poles):
      {
        "type": "snapshot",
        "tick": int,
        "note": str,
        "poles": [[size, ...], [size, ...], [size, ...]],
        "move": [src, dest],
        "disk": int
      }
    """

    def __init__(self):
        self.events: List[Dict[str, Any]] = []
        self._last_poles: Optional[List[List[int]]] = None

    def snapshot(self, state: PuzzleState, note: str = ""):
        frame: Dict[str, Any] = {
            "type": "snapshot",
            "tick": state.moves,
            "note": note,
        }
        poles = state.snapshot()
        frame["poles"] = poles

        # Recover the move by diffing against the previous frame
        if self._last_poles is not None:
            src = next((i for i, p in enumerate(poles) if len(p) < len(self._last_poles[i])), None)
            dest = next((i for i, p in enumerate(poles) if len(p) > len(self._last_poles[i])), None)
            if src is not None and dest is not None:
                frame["move"] = [src, dest]
                frame["disk"] = poles[dest][-1]
        self._last_poles = poles
        self.events.append(frame)

    def __call__(self, state: PuzzleState):
        self.snapshot(state)

    def to_json(self, path: str):
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.events, f, indent=2)
        except OSError as exc:
            raise ResourceError(f"Failed to write trace {path}: {exc}") from exc
