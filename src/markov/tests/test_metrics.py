import math
from pathlib import Path

import pytest

from markov.chain import Chain
from markov.metrics import (
    DotStyle,
    branching_entropy,
    mean_branching_entropy,
    n_states,
    n_transitions,
    save_dot,
    to_dot,
    to_edge_list,
    to_frame,
)
from markov.types import SENTINEL


def _chain() -> Chain:
    return Chain().feed([3, 5, 10]).feed([5, 12])


def test_model_size():
    chain = _chain()
    assert n_states(chain) == 4
    assert n_transitions(chain) == 7
    assert n_states(Chain()) == 0
    assert n_transitions(Chain()) == 0


def test_branching_entropy_per_state():
    chain = _chain()
    assert branching_entropy(chain, 5, log_base=2.0) == pytest.approx(1.0)
    assert branching_entropy(chain, 5) == pytest.approx(math.log(2))
    assert branching_entropy(chain, 3) == 0.0
    assert branching_entropy(chain, "unknown") == 0.0


def test_mean_branching_entropy():
    chain = _chain()
    # sentinel and 5 each branch two ways; 3, 10 and 12 are deterministic
    assert mean_branching_entropy(chain, log_base=2.0) == pytest.approx(2 / 5)
    assert mean_branching_entropy(chain, log_base=2.0, weighted=True) == pytest.approx(4 / 7)
    assert mean_branching_entropy(Chain()) == 0.0


def test_edge_list_is_ordered_with_probabilities():
    edges = to_edge_list(_chain())
    assert edges[0] == (SENTINEL, 3, 1, 0.5)
    assert edges[1] == (SENTINEL, 5, 1, 0.5)
    assert (5, 10, 1, 0.5) in edges
    assert (10, SENTINEL, 1, 1.0) in edges
    assert len(edges) == 7

    by_state = {}
    for s, _, _, p in edges:
        by_state[s] = by_state.get(s, 0.0) + p
    for s, total in by_state.items():
        assert abs(total - 1.0) < 1e-9, f"{s!r} sums to {total}"


def test_to_frame():
    df = to_frame(_chain())
    assert list(df.columns) == ["state", "successor", "count", "probability"]
    assert len(df) == 7
    assert df["count"].sum() == 7


def test_dot_mentions_every_state(tmp_path: Path):
    chain = Chain().feed(["the", 'say "hi"'])
    dot = to_dot(chain, label="demo", style=DotStyle(show_counts=True))

    assert dot.startswith('digraph "markov_chain" {')
    assert "START/END" in dot
    assert 'label="the"' in dot
    assert 'label="say \\"hi\\""' in dot
    assert 'label="1.000 (1)"' in dot
    assert dot.count("->") == 3

    path = tmp_path / "out" / "chain.dot"
    save_dot(path, dot)
    assert path.read_text(encoding="utf-8") == dot


def test_dot_of_empty_chain():
    assert to_dot(Chain()) == 'digraph "markov_chain" {}'
