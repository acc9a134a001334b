from dataclasses import dataclass

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

def normalize_seed(seed: int) -> int:
    # 0 (and multiples of M) would lock the generator at 0 forever.
    s = seed % M
    return s if s else 1

@dataclass
class PMRandom:
    """
    Park–Miller minimal-standard generator exposing the two calls the maze
    generator needs from a random source (``random`` and ``randrange``), so
    it can stand in for ``random.Random`` wherever a reproducible,
    platform-independent sequence is wanted.
    """
    state: int

    def __post_init__(self) -> None:
        self.state = normalize_seed(self.state)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # 1..M-1 mapped into [0, 1)
        return (self.next32() - 1) / (M - 1)

    def randrange(self, n: int) -> int:
        if n <= 0:
            raise ValueError("randrange() needs a positive bound")
        return self.next32() % n

def seed_for_level(base_seed: int, level_index: int) -> int:
    """Derive a per-level seed so each slot in a pack gets its own maze."""
    s = normalize_seed(base_seed)
    for _ in range(level_index + 1):
        s = pm_next(s)
    return s
