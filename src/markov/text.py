"""Whitespace-tokenized text chains."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from markov.chain.engine import Chain

LOGGER = logging.getLogger(__name__)


def tokenize(text: str) -> List[str]:
    """Split on any run of whitespace; empty fields are dropped."""
    return text.split()


def join_tokens(tokens: Iterable[str]) -> str:
    return " ".join(tokens)


class TextChain(Chain[str]):
    """Chain over words, with string in/out helpers."""

    def feed_str(self, text: str) -> "TextChain":
        return self.feed(tokenize(text))

    def feed_file(self, path: Path) -> "TextChain":
        """Feed a file where each non-blank line is one sentence."""
        path = Path(path)
        n_lines = 0
        with path.open("r", encoding="utf-8") as f:
            for line in f:
                words = tokenize(line)
                if not words:
                    continue
                self.feed(words)
                n_lines += 1
        LOGGER.debug("Fed %d lines from %s", n_lines, path)
        return self

    def generate_str(self, rng: Optional[random.Random] = None) -> str:
        return join_tokens(self.generate(rng))

    def generate_str_from_token(self, word: str, rng: Optional[random.Random] = None) -> str:
        """Sentence starting with `word`, or "" if the word was never fed."""
        return join_tokens(self.generate_from_token(word, rng))

    def str_iter(self, rng: Optional[random.Random] = None) -> Iterator[str]:
        return map(join_tokens, self.iter(rng))

    def str_iter_for(self, size: int, rng: Optional[random.Random] = None) -> Iterator[str]:
        return map(join_tokens, self.iter_for(size, rng))
