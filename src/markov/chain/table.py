from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from markov.types import SENTINEL, State


class UnknownStateError(KeyError):
    """A state was looked up before being registered; always an internal bug."""


class Distribution:
    """Successor counts for one state, with a cached cumulative view for sampling."""

    __slots__ = ("_counts", "_total", "_ordered")

    def __init__(self) -> None:
        self._counts: Dict[State, int] = {}
        self._total = 0
        self._ordered: Optional[Tuple[List[State], np.ndarray]] = None

    @property
    def total(self) -> int:
        return self._total

    @property
    def counts(self) -> Mapping[State, int]:
        return MappingProxyType(self._counts)

    def count(self, state: State) -> int:
        return self._counts.get(state, 0)

    def increment(self, state: State, by: int = 1) -> None:
        if by < 0:
            raise ValueError(f"Transition counts only grow; got increment {by}.")
        if by == 0:
            return
        self._counts[state] = self._counts.get(state, 0) + by
        self._total += by
        self._ordered = None

    def ordered(self) -> Tuple[List[State], np.ndarray]:
        """
        Successors in first-recorded order, paired with their running count totals.

        Tokens only need to be hashable, so the order never compares them; a
        snapshot or JSON round trip replays the same insertion order.
        """
        if self._ordered is None:
            states = list(self._counts)
            counts = np.fromiter((self._counts[s] for s in states), dtype=np.int64, count=len(states))
            self._ordered = (states, np.cumsum(counts))
        return self._ordered

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[State]:
        return iter(self._counts)

    def __repr__(self) -> str:
        return f"Distribution({self._counts!r})"


class TransitionTable:
    """Mapping from a state to the distribution over its observed successors."""

    def __init__(self) -> None:
        self._table: Dict[State, Distribution] = {SENTINEL: Distribution()}

    def ensure_state(self, state: State) -> Distribution:
        dist = self._table.get(state)
        if dist is None:
            dist = Distribution()
            self._table[state] = dist
        return dist

    def record_transition(self, frm: State, to: State, by: int = 1) -> None:
        self.ensure_state(to)
        self.ensure_state(frm).increment(to, by)

    def distribution_of(self, state: State) -> Distribution:
        try:
            return self._table[state]
        except KeyError:
            raise UnknownStateError(state) from None

    def states(self) -> Iterator[State]:
        return iter(self._table)

    def items(self) -> Iterator[Tuple[State, Distribution]]:
        return iter(self._table.items())

    def __contains__(self, state: object) -> bool:
        return state in self._table

    def __len__(self) -> int:
        return len(self._table)
