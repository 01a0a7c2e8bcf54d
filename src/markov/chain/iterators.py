from __future__ import annotations

import random
from typing import TYPE_CHECKING, Generic, Iterator, List, Optional, TypeVar

if TYPE_CHECKING:
    from .engine import Chain

T = TypeVar("T")


class SizedChainIterator(Generic[T]):
    """Yields exactly `size` independently generated sequences. Not restartable."""

    def __init__(self, chain: "Chain[T]", size: int, rng: Optional[random.Random] = None):
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}.")
        self.chain = chain
        self.remaining = size
        self.rng = rng

    def __iter__(self) -> Iterator[List[T]]:
        return self

    def __next__(self) -> List[T]:
        if self.remaining <= 0:
            raise StopIteration
        self.remaining -= 1
        return self.chain.generate(self.rng)

    def __length_hint__(self) -> int:
        return self.remaining


class InfiniteChainIterator(Generic[T]):
    """Unbounded stream of generated sequences; the consumer decides when to stop."""

    def __init__(self, chain: "Chain[T]", rng: Optional[random.Random] = None):
        self.chain = chain
        self.rng = rng

    def __iter__(self) -> Iterator[List[T]]:
        return self

    def __next__(self) -> List[T]:
        return self.chain.generate(self.rng)
