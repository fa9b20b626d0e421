from __future__ import annotations

from enum import Enum


class LetterFeedback(str, Enum):
    """Per-position result of comparing a word against the target."""

    CORRECT = "correct"  # same letter, same position
    PRESENT = "present"  # letter occurs somewhere else in the target
    ABSENT = "absent"


class GameStatus(str, Enum):
    FRESH = "fresh"
    IN_PROGRESS = "in_progress"
    WON = "won"
