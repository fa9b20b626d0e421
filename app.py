from __future__ import annotations

import logging
import random

from weaver.config.settings import Settings
from weaver.logging.setup import setup_logging

from weaver.services.wordlist import WordList
from weaver.games.english.weaver import WeaverGame

from weaver.platforms.cli.console import WeaverConsole

logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.load()
    setup_logging(settings)

    # --- Load word list once ---
    wordlist = WordList.load_from_txt(settings.dictionary_path, word_length=settings.word_length)

    # --- Game ---
    rng = random.Random(settings.random_seed)
    game = WeaverGame(
        wordlist=wordlist,
        rng=rng,
        default_start=settings.default_start_word,
        default_target=settings.default_target_word,
        random_words=settings.random_words,
        show_error_messages=settings.show_error_messages,
        show_path=settings.show_path,
    )
    logger.info("Starting %s (%s): %s -> %s", game.key, settings.env, game.start_word, game.target_word)

    # --- Console frontend ---
    console = WeaverConsole(game=game)
    try:
        console.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, bye")


if __name__ == "__main__":
    main()
