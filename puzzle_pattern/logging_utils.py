"""Logging setup for the pattern service."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once with the given level name."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("puzzle_pattern").setLevel(level.upper())
