import random
from typing import Optional


def seeded_rng(seed: int) -> random.Random:
    return random.Random(seed)


def resolve_rng(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> random.Random:
    """Pick an explicit generator, a seeded one, or a fresh private one, in that order."""
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both.")
    if rng is not None:
        return rng
    if seed is not None:
        return seeded_rng(seed)
    return random.Random()
