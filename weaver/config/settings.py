from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from weaver.domain.errors import ConfigurationError

DEFAULT_DICTIONARY_PATH = Path(__file__).resolve().parent.parent / "assets" / "dictionary.txt"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got {raw!r}")


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """
    Global application settings loaded from environment variables.

    This class should remain dependency-free and side-effect free
    except for loading environment variables.
    """

    # Environment
    env: str
    log_level: str

    # Dictionary
    dictionary_path: Path
    word_length: int

    # Game
    default_start_word: str
    default_target_word: str
    random_words: bool
    show_error_messages: bool
    show_path: bool
    random_seed: int | None

    @classmethod
    def load(cls) -> "Settings":
        """
        Load settings from environment variables.
        """

        # Load .env for local development
        load_dotenv()

        env = os.getenv("ENV", "development")
        log_level = os.getenv("LOG_LEVEL", "INFO")

        dictionary_path_raw = os.getenv("DICTIONARY_PATH")
        dictionary_path = Path(dictionary_path_raw) if dictionary_path_raw else DEFAULT_DICTIONARY_PATH

        word_length = _env_int("WORD_LENGTH", 4)
        if word_length is None or word_length < 1:
            raise ConfigurationError(f"WORD_LENGTH must be positive, got {word_length}")

        return cls(
            env=env,
            log_level=log_level,
            dictionary_path=dictionary_path,
            word_length=word_length,
            default_start_word=os.getenv("DEFAULT_START_WORD", "sale").strip().lower(),
            default_target_word=os.getenv("DEFAULT_TARGET_WORD", "opal").strip().lower(),
            random_words=_env_bool("RANDOM_WORDS", False),
            show_error_messages=_env_bool("SHOW_ERROR_MESSAGES", True),
            show_path=_env_bool("SHOW_PATH", False),
            random_seed=_env_int("RANDOM_SEED", None),
        )
