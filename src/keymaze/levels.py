# src/keymaze/levels.py
# levels.json packs: {"levels": [grid, grid, ...]} with 0..4 tile values.

from __future__ import annotations

import json
import logging
import os
from typing import Any, List, Sequence

from .config import DEFAULTS, GeneratorConfig
from .grid import Grid, copy_grid, is_rectangular
from .level import Level
from .mapgen.generator import generate_level
from .tiles import is_valid_tile

logger = logging.getLogger(__name__)


class LevelFormatError(ValueError):
    pass


def validate_grid(grid: Any, where: str = "grid") -> Grid:
    """
    Check shape and tile values and return a plain list-of-lists copy.
    Solvability is not checked; hand-authored levels may omit a key.
    """
    if not isinstance(grid, list) or not grid or not all(isinstance(row, list) for row in grid):
        raise LevelFormatError(f"{where}: expected a non-empty list of rows")
    if not is_rectangular(grid):
        raise LevelFormatError(f"{where}: rows must be non-empty and of equal length")
    for r, row in enumerate(grid):
        for c, t in enumerate(row):
            if isinstance(t, bool) or not isinstance(t, int) or not is_valid_tile(t):
                raise LevelFormatError(f"{where}: bad tile {t!r} at ({r},{c})")
    return copy_grid(grid)


def parse_pack(data: Any) -> List[Grid]:
    if not isinstance(data, dict) or not isinstance(data.get("levels"), list):
        raise LevelFormatError('level pack must be an object with a "levels" list')
    return [validate_grid(g, where=f"level {i + 1}") for i, g in enumerate(data["levels"])]


def load_pack(path: str) -> List[Grid]:
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise LevelFormatError(f"{path}: not valid UTF-8 JSON ({e})") from e
    grids = parse_pack(data)
    logger.info("loaded %d levels from %s", len(grids), path)
    return grids


def save_pack(path: str, grids: Sequence[Sequence[Sequence[int]]]) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    payload = {"levels": [[[int(t) for t in row] for row in g] for g in grids]}
    with open(path, "w", encoding="utf-8") as f:
        # one row per line keeps packs readable in diffs
        f.write('{\n  "levels": [\n')
        blocks = []
        for g in payload["levels"]:
            rows = ",\n".join("      " + json.dumps(row) for row in g)
            blocks.append("    [\n" + rows + "\n    ]")
        f.write(",\n".join(blocks))
        f.write("\n  ]\n}\n")


def ensure_min_levels(grids: List[Grid], config: GeneratorConfig = DEFAULTS, rng=None) -> List[Grid]:
    """Append generated levels until the pack holds at least config.min_levels."""
    while len(grids) < config.min_levels:
        grids.append(generate_level(config, rng=rng))
        logger.info("padded pack with generated level %d", len(grids))
    return grids


def build_levels(grids: Sequence[Sequence[Sequence[int]]]) -> List[Level]:
    """Fresh Level objects over copies of the authored grids."""
    return [Level.from_grid(g) for g in grids]
