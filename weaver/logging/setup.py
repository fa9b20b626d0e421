from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weaver.config.settings import Settings


def setup_logging(settings: "Settings") -> None:
    """
    Configure application-wide logging.

    - Uses stderr (stdout belongs to the console game board)
    - Avoids duplicate handlers
    """

    # Normalize level
    level_name = (settings.log_level or "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()

    # If handlers already exist (e.g., tests), don't double-add
    if root.handlers:
        root.setLevel(level)
        return

    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
