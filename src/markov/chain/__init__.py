from .engine import Chain
from .iterators import InfiniteChainIterator, SizedChainIterator
from .sampling import sample
from .table import Distribution, TransitionTable, UnknownStateError
from .tokens import TokenStore

__all__ = [
    "Chain",
    "Distribution",
    "InfiniteChainIterator",
    "SizedChainIterator",
    "TokenStore",
    "TransitionTable",
    "UnknownStateError",
    "sample",
]
