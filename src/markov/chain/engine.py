from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Generic, Iterable, Iterator, List, Mapping, Optional, TypeVar

from markov.types import SENTINEL, Snapshot, State
from markov.utils.rng import resolve_rng

from .iterators import InfiniteChainIterator, SizedChainIterator
from .sampling import sample
from .table import TransitionTable
from .tokens import TokenStore

T = TypeVar("T")
C = TypeVar("C", bound="Chain")

LOGGER = logging.getLogger(__name__)


class Chain(Generic[T]):
    """
    First-order Markov chain over hashable, mutually orderable tokens.

    Sequences are fed with an implicit sentinel (None) before the first token and
    after the last, so generation walks from the sentinel back to the sentinel.

    rng:
      generator used when a call does not pass its own; defaults to a private
      unseeded random.Random.
    seed:
      shorthand for rng=random.Random(seed).
    max_length:
      optional cap on the number of generated tokens. None (default) leaves
      generation unbounded.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        seed: Optional[int] = None,
        max_length: Optional[int] = None,
    ):
        if max_length is not None and max_length < 1:
            raise ValueError(f"max_length must be >= 1, got {max_length}.")
        self.rng = resolve_rng(rng, seed)
        self.max_length = max_length
        self._tokens: TokenStore[T] = TokenStore()
        self._table = TransitionTable()

    def is_empty(self) -> bool:
        return self._table.distribution_of(SENTINEL).total == 0

    def feed(self: C, tokens: Iterable[T]) -> C:
        """
        Record every consecutive pair of [sentinel, *tokens, sentinel]. O(n).

        The whole input is checked before anything is recorded, so a bad token
        leaves the chain untouched.
        """
        seq = list(tokens)
        for i, token in enumerate(seq):
            if token is SENTINEL:
                raise ValueError(f"None cannot be fed as a token (position {i}); it is the sequence sentinel.")
            hash(token)
        if not seq:
            return self

        prev: State = SENTINEL
        for token in seq:
            current = self._tokens.intern(token)
            self._table.record_transition(prev, current)
            prev = current
        self._table.record_transition(prev, SENTINEL)
        LOGGER.debug("Fed %d tokens; chain has %d states", len(seq), len(self._tokens))
        return self

    def _walk(self, start: State, rng: random.Random, out: List[T]) -> List[T]:
        current = start
        while self.max_length is None or len(out) < self.max_length:
            found, nxt = sample(self._table.distribution_of(current), rng)
            if not found or nxt is SENTINEL:
                break
            out.append(nxt)
            current = nxt
        return out

    def generate(self, rng: Optional[random.Random] = None) -> List[T]:
        return self._walk(SENTINEL, rng if rng is not None else self.rng, [])

    def generate_from_token(self, token: T, rng: Optional[random.Random] = None) -> List[T]:
        """Generate a sequence starting with `token`; [] if the token was never fed."""
        if token is SENTINEL:
            return []
        canonical = self._tokens.lookup(token)
        if canonical is None:
            return []
        return self._walk(canonical, rng if rng is not None else self.rng, [canonical])

    def iter(self, rng: Optional[random.Random] = None) -> InfiniteChainIterator[T]:
        return InfiniteChainIterator(self, rng=rng)

    def iter_for(self, size: int, rng: Optional[random.Random] = None) -> SizedChainIterator[T]:
        return SizedChainIterator(self, size, rng=rng)

    def states(self) -> Iterator[T]:
        return iter(self._tokens)

    def successors(self, state: State) -> Mapping[State, int]:
        if state not in self._table:
            return {}
        return self._table.distribution_of(state).counts

    def transition_count(self, frm: State, to: State) -> int:
        if frm not in self._table:
            return 0
        return self._table.distribution_of(frm).count(to)

    def snapshot(self) -> Snapshot:
        """Plain {state: {successor: count}} copy of the transition table."""
        return {state: dict(dist.counts) for state, dist in self._table.items()}

    @classmethod
    def from_snapshot(
        cls: type[C],
        snapshot: Mapping[State, Mapping[State, int]],
        rng: Optional[random.Random] = None,
        *,
        seed: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> C:
        chain = cls(rng, seed=seed, max_length=max_length)
        for state, successors in snapshot.items():
            frm = chain._register(state)
            chain._table.ensure_state(frm)
            for succ, count in successors.items():
                if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                    raise ValueError(
                        f"Transition count for {state!r} -> {succ!r} must be a non-negative int, got {count!r}."
                    )
                to = chain._register(succ)
                if count:
                    chain._table.record_transition(frm, to, by=count)
                else:
                    chain._table.ensure_state(to)
        LOGGER.debug("Rebuilt chain with %d states from snapshot", len(chain._tokens))
        return chain

    def _register(self, state: State) -> State:
        if state is SENTINEL:
            return SENTINEL
        return self._tokens.intern(state)

    def save(self, path: Path) -> None:
        from markov.utils.io import save_chain

        save_chain(Path(path), self)

    @classmethod
    def load(cls: type[C], path: Path, **kwargs) -> C:
        from markov.utils.io import load_chain

        return load_chain(Path(path), cls=cls, **kwargs)

    def __contains__(self, token: object) -> bool:
        return token is not SENTINEL and token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(states={len(self._tokens)}, empty={self.is_empty()})"
