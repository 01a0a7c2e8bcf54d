import random

import pytest

from markov.chain.sampling import sample
from markov.chain.table import Distribution
from markov.types import SENTINEL


class FixedDraw:
    """Stands in for random.Random with a predetermined randrange result."""

    def __init__(self, value: int):
        self.value = value
        self.calls = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.value


def _dist() -> Distribution:
    dist = Distribution()
    dist.increment("b", 3)
    dist.increment("a", 2)
    dist.increment(SENTINEL, 1)
    return dist


@pytest.mark.parametrize(
    "draw, expected",
    [(0, "b"), (1, "b"), (2, "b"), (3, "a"), (4, "a"), (5, SENTINEL)],
)
def test_inverse_transform_over_first_recorded_order(draw, expected):
    rng = FixedDraw(draw)
    found, state = sample(_dist(), rng)
    assert found
    assert state == expected
    assert rng.calls == [6]


def test_empty_distribution_has_no_successor():
    rng = FixedDraw(0)
    found, state = sample(Distribution(), rng)
    assert not found
    assert state is SENTINEL
    assert rng.calls == []


def test_empirical_frequencies_converge_to_count_ratios():
    dist = _dist()
    rng = random.Random(123)
    n = 30_000
    hits = {SENTINEL: 0, "a": 0, "b": 0}
    for _ in range(n):
        _, state = sample(dist, rng)
        hits[state] += 1

    for state, count in ((SENTINEL, 1), ("a", 2), ("b", 3)):
        assert abs(hits[state] / n - count / 6) < 0.02, f"{state!r}: {hits[state] / n:.3f}"
