from __future__ import annotations
from typing import FrozenSet, Iterable


class WordValidator:
    """Exact, case-insensitive word checks against a preloaded dictionary."""

    def __init__(self, words: Iterable[str]):
        # Store uppercase words
        self._words: FrozenSet[str] = frozenset(w.upper() for w in words)

    def is_valid_word(self, word: str) -> bool:
        if not word:
            return False
        return word.upper() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid_word(word)

    def __len__(self) -> int:
        return len(self._words)
