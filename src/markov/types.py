from typing import Dict, Hashable, Optional

# Tokens are any hashable value; the sentinel is None and marks both the start and
# the end of a fed sequence.
Token = Hashable
State = Optional[Token]
Snapshot = Dict[State, Dict[State, int]]

SENTINEL: State = None
