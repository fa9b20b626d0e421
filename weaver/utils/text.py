from __future__ import annotations

import re

_WORD_RE = re.compile(r"^[a-z]+$")


def normalize_word(raw: str) -> str:
    return raw.strip().lower()


def is_valid_word_shape(word: str, *, length: int) -> bool:
    """
    True if the (already normalized) word is exactly `length` letters a-z.
    """
    if len(word) != length:
        return False
    return bool(_WORD_RE.match(word))
