from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from weaver.domain.errors import EmptyDictionary
from weaver.utils.text import is_valid_word_shape, normalize_word

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 4


@dataclass(frozen=True)
class WordList:
    """
    In-memory fixed-length word list (the game dictionary).
    Designed to be loaded once at startup and shared read-only across games.

    File format (one word per line):
      sale
      pale
      opal
      ...
    """

    words: frozenset[str]
    word_length: int = DEFAULT_WORD_LENGTH

    @classmethod
    def from_words(cls, words: Iterable[str], *, word_length: int = DEFAULT_WORD_LENGTH) -> "WordList":
        cleaned: set[str] = set()
        for raw in words:
            w = normalize_word(raw)
            # keep only plain a-z words of the configured length
            if not is_valid_word_shape(w, length=word_length):
                continue
            cleaned.add(w)

        if not cleaned:
            raise EmptyDictionary(f"No valid {word_length}-letter words supplied")

        return cls(words=frozenset(cleaned), word_length=word_length)

    @classmethod
    def load_from_txt(cls, path: Path, *, word_length: int = DEFAULT_WORD_LENGTH) -> "WordList":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Word list file not found: {path}")

        # utf-8 with errors ignored to be resilient to odd characters
        with path.open("r", encoding="utf-8", errors="ignore") as f:
            lines = [line for line in f if line.strip()]

        try:
            wordlist = cls.from_words(lines, word_length=word_length)
        except EmptyDictionary:
            raise EmptyDictionary(f"No valid {word_length}-letter words found in {path}") from None

        logger.info("Loaded %s %s-letter words from %s", len(wordlist), word_length, path)
        return wordlist

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.words))

    def __contains__(self, w: object) -> bool:
        return isinstance(w, str) and self.contains(w)

    def contains(self, w: str) -> bool:
        """
        True if the normalized lowercase word is in the list.
        """
        return normalize_word(w) in self.words

    def sample(self, rng: random.Random, *, fallback: str) -> str:
        """
        Pick a random word of the configured length using the caller's rng.
        Returns `fallback` if there is nothing to pick from.
        """
        pool = sorted(w for w in self.words if len(w) == self.word_length)
        if not pool:
            logger.warning("Word list has no %s-letter words, using fallback %r", self.word_length, fallback)
            return fallback
        return rng.choice(pool)
