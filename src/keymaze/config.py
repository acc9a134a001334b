from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class GeneratorConfig:
    # Defaults match the generated third level of the original pack:
    # 7×10, tougher wall density, generous attempt budget.
    rows: int = 7
    cols: int = 10
    wall_density: float = 0.42
    max_attempts: int = 400
    # A pack with fewer levels than this is padded with generated ones.
    min_levels: int = 3
    # Spawn used when a level carries no start tile.
    fallback_spawn: Tuple[int, int] = (1, 1)

# Module default (tools may build their own from CLI flags)
DEFAULTS = GeneratorConfig()
