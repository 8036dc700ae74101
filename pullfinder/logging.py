"""Logging for the pullfinder package logger.

Finder traces (one per matching pull request, plus the fallback notice) are
DEBUG records under ``pullfinder.finder``; nothing else is logged. Level and
format come from config.yaml (logging.level, logging.format) or env
(LOGGING_LEVEL, LOGGING_FORMAT).

Only the ``pullfinder`` logger is touched, never the root logger, so
applications keep their own logging setup.
"""

import logging

from pullfinder.config import LoggingConfig

PACKAGE_LOGGER = "pullfinder"
FINDER_LOGGER = "pullfinder.finder"

# Supported levels only (DEBUG, INFO, WARNING, ERROR)
LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    """Map level name to logging constant.

    Falls back to INFO if unknown.
    """
    return LEVELS.get(level.upper().strip(), logging.INFO)


class _FinderHandler(logging.StreamHandler):
    """Stream handler installed by FinderLogging (replaced on each setup)."""


class FinderLogging:
    """Applies LoggingConfig to the pullfinder logger."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT

    def setup(self) -> logging.Logger:
        """Set level and a single formatted stream handler on the package
        logger, replacing the handler from a previous setup."""
        logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in [h for h in logger.handlers if isinstance(h, _FinderHandler)]:
            logger.removeHandler(handler)
            handler.close()
        handler = _FinderHandler()
        handler.setFormatter(logging.Formatter(self._format))
        logger.addHandler(handler)
        logger.setLevel(self._level)
        return logger

    def finder_logger(self) -> logging.Logger:
        """Configure the package logger and return the finder's child logger."""
        return self.setup().getChild(FINDER_LOGGER.rsplit(".", 1)[1])
