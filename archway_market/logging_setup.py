"""Logging configuration for the CLI and library users."""
from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_NOISY_LOGGERS = ("aiohttp", "grpc", "urllib3")


def configure_logging(level_name: str = "INFO") -> None:
    """Configure the root logger; unknown level names fall back to INFO."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=_FORMAT)
    logging.getLogger().setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
