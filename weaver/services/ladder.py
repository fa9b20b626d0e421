"""
Word-ladder graph helpers.

Nodes are dictionary words, edges join words that differ in exactly one
position. The graph is implicit: neighbours are generated on demand by
substituting letters and checking membership, never precomputed.
"""

from __future__ import annotations

import string
from collections import deque
from typing import Iterator

from weaver.services.wordlist import WordList

ALPHABET = string.ascii_lowercase


def differs_by_one_letter(a: str, b: str) -> bool:
    if len(a) != len(b):
        return False

    differences = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            differences += 1
            if differences > 1:
                return False

    return differences == 1


def neighbours(word: str, wordlist: WordList) -> Iterator[str]:
    """
    Yield every dictionary word one substitution away from `word`.
    """
    for i, current in enumerate(word):
        prefix, suffix = word[:i], word[i + 1:]
        for c in ALPHABET:
            if c == current:
                continue
            candidate = prefix + c + suffix
            if candidate in wordlist.words:
                yield candidate


def find_shortest_path(start: str, target: str, wordlist: WordList) -> list[str]:
    """
    Breadth-first search from `start` to `target`.

    Returns the shortest ladder including both ends, or [] if the target
    can't be reached. Every word is expanded at most once.
    """
    parents: dict[str, str | None] = {start: None}
    queue: deque[str] = deque([start])

    while queue:
        current = queue.popleft()

        if current == target:
            path: list[str] = []
            node: str | None = current
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path

        for nxt in neighbours(current, wordlist):
            if nxt in parents:
                continue
            parents[nxt] = current
            queue.append(nxt)

    return []
