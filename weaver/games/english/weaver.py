from __future__ import annotations

import logging
import random

from weaver.domain.errors import DictionaryTooSmall, InvalidDefaultWords
from weaver.domain.models import GameStatus, LetterFeedback
from weaver.games.base import Game
from weaver.services.ladder import differs_by_one_letter, find_shortest_path
from weaver.services.wordlist import WordList
from weaver.utils.text import is_valid_word_shape, normalize_word

logger = logging.getLogger(__name__)

GAME_KEY = "weaver"

# Used when random words are off
DEFAULT_START_WORD = "sale"
DEFAULT_TARGET_WORD = "opal"


class WeaverGame(Game):
    """
    Word ladder puzzle: turn the start word into the target word by changing
    one letter at a time, every step being a dictionary word.

    Rules:
      - each attempt must be in the word list
      - each attempt differs by exactly one letter from the previous attempt
        (the first attempt from the start word)
      - the game is won when the last attempt equals the target word

    Winning does not lock the session; whether to keep accepting words after
    a win is up to the frontend.

    Feedback is positional/containment only: a letter not in the right spot
    is PRESENT whenever the target contains it at all, with no per-letter
    count limit (e.g. "oooo" vs "opal" -> CORRECT, PRESENT, PRESENT, PRESENT).
    """

    key = GAME_KEY

    def __init__(
        self,
        *,
        wordlist: WordList,
        rng: random.Random | None = None,
        default_start: str = DEFAULT_START_WORD,
        default_target: str = DEFAULT_TARGET_WORD,
        random_words: bool = False,
        show_error_messages: bool = False,
        show_path: bool = False,
    ) -> None:
        super().__init__()

        # Rejection sampling in new_game() needs two distinct words to terminate
        playable = sum(1 for w in wordlist.words if len(w) == wordlist.word_length)
        if playable < 2:
            raise DictionaryTooSmall(
                f"Need at least 2 {wordlist.word_length}-letter words to play, word list has {playable}"
            )

        self._wordlist = wordlist
        self._rng = rng if rng is not None else random.Random()
        self._default_start = normalize_word(default_start)
        self._default_target = normalize_word(default_target)

        self._show_error_messages = bool(show_error_messages)
        self._show_path = bool(show_path)
        self._random_words = bool(random_words)

        # The default pair only matters while random words are off
        if not self._random_words:
            self._check_default_words()

        self._attempts: list[str] = []
        self._start_word = self._default_start
        self._target_word = self._default_target
        self._pick_words()

    # -------------------------
    # State
    # -------------------------

    @property
    def word_length(self) -> int:
        return self._wordlist.word_length

    @property
    def start_word(self) -> str:
        return self._start_word

    @property
    def target_word(self) -> str:
        return self._target_word

    @property
    def current_attempt(self) -> int:
        return len(self._attempts)

    @property
    def show_error_messages(self) -> bool:
        return self._show_error_messages

    @property
    def show_path(self) -> bool:
        return self._show_path

    @property
    def random_words(self) -> bool:
        return self._random_words

    @property
    def status(self) -> GameStatus:
        if not self._attempts:
            return GameStatus.FRESH
        if self.has_won():
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    def get_attempts(self) -> list[str]:
        return list(self._attempts)

    def _last_word(self) -> str:
        return self._attempts[-1] if self._attempts else self._start_word

    def _check_default_words(self) -> None:
        start, target = self._default_start, self._default_target
        if start == target:
            raise InvalidDefaultWords(f"Start and target words must differ (both {start!r})")
        for w in (start, target):
            if w not in self._wordlist.words:
                raise InvalidDefaultWords(f"Default word {w!r} is not in the word list")

    def _pick_words(self) -> None:
        if not self._random_words:
            self._start_word = self._default_start
            self._target_word = self._default_target
            return

        fallback = self._default_start
        self._start_word = self._wordlist.sample(self._rng, fallback=fallback)
        target = self._wordlist.sample(self._rng, fallback=fallback)
        while target == self._start_word:
            target = self._wordlist.sample(self._rng, fallback=fallback)
        self._target_word = target

    # -------------------------
    # Play
    # -------------------------

    def is_valid_word(self, word: str) -> bool:
        word = normalize_word(word)
        if not is_valid_word_shape(word, length=self.word_length):
            return False
        if word not in self._wordlist.words:
            return False
        return differs_by_one_letter(self._last_word(), word)

    def submit_word(self, word: str) -> bool:
        word = normalize_word(word)

        if not self.is_valid_word(word):
            logger.debug("Rejected %r after %r", word, self._last_word())
            return False

        self._attempts.append(word)
        logger.debug("Accepted %r (attempt %s)", word, self.current_attempt)

        if self.has_won():
            logger.info(
                "Solved %s -> %s in %s attempts",
                self._start_word,
                self._target_word,
                self.current_attempt,
            )

        self._notify()
        return True

    def has_won(self) -> bool:
        if not self._attempts:
            return False
        return self._attempts[-1] == self._target_word

    def get_feedback(self, word: str) -> list[LetterFeedback]:
        """
        Compare `word` against the target letter by letter.
        Returns [] for a word of the wrong length.
        """
        word = normalize_word(word)
        target = self._target_word
        if len(word) != len(target):
            return []

        feedback: list[LetterFeedback] = []
        for i, ch in enumerate(word):
            if ch == target[i]:
                feedback.append(LetterFeedback.CORRECT)
            elif ch in target:
                feedback.append(LetterFeedback.PRESENT)
            else:
                feedback.append(LetterFeedback.ABSENT)
        return feedback

    def find_path(self) -> list[str]:
        """
        Shortest ladder from the start word to the target word ([] if none).
        """
        return find_shortest_path(self._start_word, self._target_word, self._wordlist)

    # -------------------------
    # Lifecycle
    # -------------------------

    def reset_game(self) -> None:
        self._attempts.clear()
        self._notify()

    def new_game(self) -> None:
        self._attempts.clear()
        self._pick_words()
        logger.info("New game: %s -> %s (random=%s)", self._start_word, self._target_word, self._random_words)
        self._notify()

    # -------------------------
    # Settings
    # -------------------------

    def set_show_error_messages(self, flag: bool) -> None:
        self._show_error_messages = bool(flag)
        self._notify()

    def set_show_path(self, flag: bool) -> None:
        self._show_path = bool(flag)
        self._notify()

    def set_random_words(self, flag: bool) -> None:
        # Changing this setting always starts a fresh game
        if not flag:
            # Refuse before touching the session
            self._check_default_words()
        self._random_words = bool(flag)
        self.new_game()
