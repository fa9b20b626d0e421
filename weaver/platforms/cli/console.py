from __future__ import annotations

import logging
import sys
from typing import Callable, TextIO

from weaver.domain.errors import InvalidDefaultWords
from weaver.domain.models import LetterFeedback
from weaver.games.english.weaver import WeaverGame
from weaver.utils.text import normalize_word

logger = logging.getLogger(__name__)

RULE = "---------------------------"

FEEDBACK_MARKS = {
    LetterFeedback.CORRECT: "G",  # right letter, right spot
    LetterFeedback.PRESENT: "Y",  # in the target, elsewhere
    LetterFeedback.ABSENT: "X",
}

_ON_VALUES = {"true", "on", "1", "yes"}

HELP_TEXT = (
    "Commands:\n"
    "  exit | quit            leave the game\n"
    "  restart                clear your attempts (same words)\n"
    "  new                    start a new game\n"
    "  path                   show the shortest solution\n"
    "  set <flag> <value>     flags: errors, path, random (value: on/off)\n"
    "  help                   show this help"
)


class WeaverConsole:
    """
    Line-based console frontend for WeaverGame.

    The board is printed whenever the game reports a state change, so every
    accepted word, reset, new game or flag toggle shows the fresh state.
    Rejected words change nothing and only print an error (if enabled).
    """

    def __init__(
        self,
        *,
        game: WeaverGame,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self._game = game
        self._input = input_fn
        self._out = output if output is not None else sys.stdout
        self._running = False

    # -------------------------
    # Output helpers
    # -------------------------

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)

    def _error(self, text: str) -> None:
        if self._game.show_error_messages:
            self._print(f"Error: {text}")

    def _feedback_marks(self, word: str) -> str:
        return "".join(FEEDBACK_MARKS[f] for f in self._game.get_feedback(word))

    def render_board(self) -> None:
        game = self._game
        self._print()
        self._print(RULE)
        self._print(f"Start word: {game.start_word.upper()}")
        self._print(f"Target word: {game.target_word.upper()}")
        self._print(RULE)

        attempts = game.get_attempts()
        if not attempts:
            self._print("No attempts yet")
        else:
            self._print("Your attempts:")
            for i, attempt in enumerate(attempts, start=1):
                self._print(f"{i}. {attempt.upper()} [{self._feedback_marks(attempt)}]")

        self._print(RULE)

        if game.show_path:
            self.render_path()

    def render_path(self) -> None:
        game = self._game
        path = game.find_path()
        ends = f"{game.start_word.upper()} to {game.target_word.upper()}"
        if not path:
            self._print(f"No path found from {ends}")
            return

        self._print(f"Path from {ends}:")
        for i, word in enumerate(path, start=1):
            self._print(f"{i}. {word.upper()}")
        self._print(RULE)

    def _render_win(self) -> None:
        game = self._game
        self._print()
        self._print("*******************************")
        self._print("* Congratulations! You won!")
        self._print(f"* You transformed {game.start_word.upper()} into {game.target_word.upper()}")
        self._print(f"* in {game.current_attempt} attempts.")
        self._print("*******************************")
        self._print()

    # -------------------------
    # Commands
    # -------------------------

    def _handle_flag(self, args: str) -> None:
        parts = args.split()
        if len(parts) != 2:
            self._print("Invalid command. Use 'set <flag> <value>'")
            return

        flag, value = parts[0].lower(), parts[1].lower()
        on = value in _ON_VALUES

        if flag == "errors":
            self._print(f"Show error messages: {on}")
            self._game.set_show_error_messages(on)
        elif flag == "path":
            self._print(f"Show path: {on}")
            self._game.set_show_path(on)
        elif flag == "random":
            try:
                self._game.set_random_words(on)
            except InvalidDefaultWords as e:
                self._print(f"Cannot turn random words off: {e}")
                return
            self._print(f"Random words: {on}")
        else:
            self._print(f"Unknown flag: {flag}")
            self._print("Available flags: errors, path, random")

    def _handle_word(self, word: str) -> None:
        game = self._game
        if len(word) != game.word_length:
            self._error(f"Word must be {game.word_length} letters long")
            return

        if not game.submit_word(word):
            self._error(
                "Invalid word. It must be in the dictionary and differ by "
                "exactly one letter from the previous word."
            )
            return

        if game.has_won():
            self._render_win()
            answer = normalize_word(self._read("Would you like to play again? (yes/no): "))
            if answer in ("y", "yes"):
                game.new_game()
            else:
                self._print("Thanks for playing!")
                self._running = False

    def handle_line(self, line: str) -> None:
        """
        Process one line of user input.
        """
        text = normalize_word(line)
        if not text:
            return

        if text in ("exit", "quit"):
            self._print("Thanks for playing!")
            self._running = False
        elif text == "restart":
            self._print("Game reset.")
            self._game.reset_game()
        elif text == "new":
            self._print("New game started.")
            self._game.new_game()
        elif text == "path":
            self.render_path()
        elif text == "help":
            self._print(HELP_TEXT)
        elif text.startswith("set "):
            self._handle_flag(text[4:])
        else:
            self._handle_word(text)

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            self._running = False
            return ""

    # -------------------------
    # Main loop
    # -------------------------

    def run(self) -> None:
        self._print("Welcome to Weaver!")
        self._print("Change one letter at a time to transform the start word into the target word.")
        self._print("All intermediate steps must be valid words.")
        self._print("Type 'help' for commands, 'exit' to quit.")

        self._game.add_listener(self.render_board)
        self._running = True
        try:
            self.render_board()
            while self._running:
                line = self._read("Enter a word: ")
                if not self._running:
                    break
                self.handle_line(line)
        finally:
            self._game.remove_listener(self.render_board)

        logger.debug("Console session finished after %s attempts", self._game.current_attempt)
