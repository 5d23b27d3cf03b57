"""The ``geniuskit`` logger.

Records go to stderr so lyrics printed on stdout by the CLI stay clean. The
scraper logs transport failures at ERROR and empty pages at DEBUG; the CLI
raises the level to DEBUG with ``--verbose``.
"""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

logger = logging.getLogger("geniuskit")


def setup_logging(level: LogLevel = "WARNING", verbose: bool = False) -> None:
    """Attach a stderr handler to the ``geniuskit`` logger and set its level.

    Safe to call once per CLI command: later calls only change the level of
    the logger and of the handler already attached.

    Args:
        level: Level for ``geniuskit`` records
        verbose: Shortcut for ``level="DEBUG"``
    """
    if verbose:
        level = "DEBUG"
    numeric = getattr(logging, level)

    logger.setLevel(numeric)
    for existing in logger.handlers:
        existing.setLevel(numeric)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(numeric)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the ``geniuskit.<name>`` logger, e.g. ``get_logger("lyrics.fetcher")``."""
    return logging.getLogger(f"geniuskit.{name}")
