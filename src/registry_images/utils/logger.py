"""Logging setup for the command-line entry point."""

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr, leaving stdout for command output."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
