"""Model-size metrics."""

from markov.chain.engine import Chain


def n_states(chain: Chain) -> int:
    """Number of token states; the sentinel is not counted."""
    return len(chain)


def n_transitions(chain: Chain) -> int:
    """Number of distinct (state, successor) pairs with a nonzero count."""
    return sum(len(successors) for successors in chain.snapshot().values())
