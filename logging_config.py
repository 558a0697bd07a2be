"""Logging configuration for token services."""

import logging
import sys

import config


def setup_logging(level: str | None = None) -> None:
    """
    Configure application logging.

    Args:
        level: Logging level (default: settings.LOG_LEVEL)
    """
    level = level or config.settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )
    # Token claims and keys stay out of library debug output
    logging.getLogger("jose").setLevel(logging.WARNING)
