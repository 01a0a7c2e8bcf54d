from typing import Dict, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class TokenStore(Generic[T]):
    """
    Interning table: equal tokens map to the first instance seen, so every
    occurrence in the transition table references one shared object.
    """

    def __init__(self) -> None:
        self._canonical: Dict[T, T] = {}

    def intern(self, value: T) -> T:
        return self._canonical.setdefault(value, value)

    def lookup(self, value: T) -> Optional[T]:
        return self._canonical.get(value)

    def __contains__(self, value: object) -> bool:
        return value in self._canonical

    def __len__(self) -> int:
        return len(self._canonical)

    def __iter__(self) -> Iterator[T]:
        return iter(self._canonical)
