"""
Colormap loading.

A colormap file holds one ``r,g,b`` triple per line, each component an
integer in [0, 255], listed as an evenly spaced gradient. Blank lines are
skipped. Disks sample the gradient through ``state.palette_index``.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List

import numpy as np

from .errors import ResourceError

logger = logging.getLogger(__name__)


def _parse_component(raw: str, path: Path, lineno: int) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ResourceError(f"{path}:{lineno}: '{raw.strip()}' is not an integer") from exc
    if not 0 <= value <= 255:
        raise ResourceError(f"{path}:{lineno}: component {value} is outside [0, 255]")
    return value


def load_colormap(path: str | Path) -> np.ndarray:
    """
    Load a colormap file into an (N, 3) uint8 array.

    Raises:
        ResourceError: the file is missing, a row does not hold exactly three
            integers, a component is out of range, or no rows are present.
    """
    path = Path(path)
    rows: List[List[int]] = []
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            for lineno, fields in enumerate(csv.reader(fh), start=1):
                if not fields or all(not f.strip() for f in fields):
                    continue
                if len(fields) != 3:
                    raise ResourceError(
                        f"{path}:{lineno}: expected 3 comma-separated values, got {len(fields)}"
                    )
                rows.append([_parse_component(f, path, lineno) for f in fields])
    except FileNotFoundError as exc:
        raise ResourceError(f"Colormap not found: {path}") from exc
    except OSError as exc:
        raise ResourceError(f"Failed to read colormap {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ResourceError(f"{path}: colormap is not valid UTF-8 text") from exc
    except csv.Error as exc:
        raise ResourceError(f"{path}: unreadable CSV: {exc}") from exc

    if not rows:
        raise ResourceError(f"Colormap {path} defines no colors.")
    logger.debug("loaded %d colors from %s", len(rows), path)
    return np.asarray(rows, dtype=np.uint8)
