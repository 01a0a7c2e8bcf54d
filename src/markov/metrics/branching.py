import math

from markov.chain.engine import Chain
from markov.types import SENTINEL, State


def branching_entropy(chain: Chain, state: State, log_base: float = math.e) -> float:
    """
    Entropy of the successor distribution of `state`:

        H(S_{t+1} | S_t=s) = - sum_{s'} p(s'|s) log p(s'|s)

    States with no recorded successors (or never fed) have entropy 0.

    log_base:
      - math.e -> nats
      - 2.0    -> bits
    """
    counts = chain.successors(state)
    total = sum(counts.values())
    if total == 0:
        return 0.0

    h = 0.0
    for c in counts.values():
        if c <= 0:
            continue
        p = c / total
        h -= p * math.log(p)
    if log_base != math.e:
        h /= math.log(log_base)
    return h


def mean_branching_entropy(chain: Chain, log_base: float = math.e, weighted: bool = False) -> float:
    """
    Mean branching entropy over every state (sentinel included) that has successors.

    weighted=True weights each state by how often it was left, i.e. its total
    outgoing count, which approximates the expected per-step entropy of a walk.
    """
    total_w = 0.0
    total = 0.0
    for state in [SENTINEL, *chain.states()]:
        w = sum(chain.successors(state).values())
        if w == 0:
            continue
        h = branching_entropy(chain, state, log_base=log_base)
        w = float(w) if weighted else 1.0
        total_w += w
        total += w * h

    if total_w <= 0.0:
        return 0.0
    return total / total_w
