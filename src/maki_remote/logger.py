"""
Logging helpers built on loguru.

Modules call ``get_logger(__name__)`` at import time; sinks are only
configured when an application (e.g. the CLI) calls ``setup_logging``.
"""

import sys

from loguru import logger as _logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)


def get_logger(name: str):
    """Return the shared loguru logger bound to a module name."""
    return _logger.bind(name=name)


def setup_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a single stderr sink at ``level``."""
    _logger.remove()
    _logger.configure(extra={"name": "maki_remote"})
    _logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
