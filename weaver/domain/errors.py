from __future__ import annotations


class WeaverError(Exception):
    """Base class for all domain/service errors."""


# -------------------------
# Generic / infrastructure
# -------------------------

class ValidationError(WeaverError):
    """Input or state failed validation."""


class ConfigurationError(WeaverError):
    """An environment/config value could not be parsed."""


# -------------------------
# Dictionary / word list
# -------------------------

class DictionaryError(WeaverError):
    """Base class for word list problems."""


class EmptyDictionary(DictionaryError):
    """No usable words were left after loading/cleaning."""


class DictionaryTooSmall(DictionaryError):
    """A game needs at least two distinct words to pick start and target."""


# -------------------------
# Game / session errors
# -------------------------

class InvalidDefaultWords(ValidationError):
    """Default start/target pair is not two distinct dictionary words."""
