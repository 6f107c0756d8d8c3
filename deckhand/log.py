"""Logging configuration."""

from __future__ import annotations

import logging
import sys

from .config import config

_ROOT_LOGGER = "deckhand"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger below the package logger.

    The package logger gets a single stdout handler the first time any
    module asks for a logger; child loggers propagate to it.
    """

    root = logging.getLogger(_ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(getattr(logging, config.log_level.upper(), logging.WARNING))

    if not name or name == _ROOT_LOGGER:
        return root
    if not name.startswith(_ROOT_LOGGER + "."):
        name = f"{_ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
