from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)

StateListener = Callable[[], None]


class Game(ABC):
    """
    Base for single-session games.

    Games mutate their own state synchronously and then fire one change
    notification (no payload). Frontends re-read whatever they need from
    the game's getters when notified.
    """

    key: str

    def __init__(self) -> None:
        self._listeners: list[StateListener] = []

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _notify(self) -> None:
        # Copy so listeners may (un)subscribe while being called
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Listener failed in %s", self.key)

    @abstractmethod
    def reset_game(self) -> None:
        """
        Restart the current puzzle from scratch (same words).
        """
        raise NotImplementedError

    @abstractmethod
    def new_game(self) -> None:
        raise NotImplementedError
