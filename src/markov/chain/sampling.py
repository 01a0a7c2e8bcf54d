import random
from typing import Tuple

import numpy as np

from markov.types import SENTINEL, State

from .table import Distribution


def sample(dist: Distribution, rng: random.Random) -> Tuple[bool, State]:
    """
    Inverse-transform draw from a count distribution.

    Draws r uniformly from [0, total) and returns the first successor, in
    deterministic order, whose cumulative count exceeds r. Returns
    (False, SENTINEL) when the distribution has no recorded successors.
    """
    total = dist.total
    if total == 0:
        return False, SENTINEL

    states, cumulative = dist.ordered()
    r = rng.randrange(total)
    # cumulative is cached per distribution between feeds, so repeated draws
    # during generation only pay for the binary search.
    idx = int(np.searchsorted(cumulative, r, side="right"))
    return True, states[idx]
