"""Package logger of neoanalyzer. (`help(neoanalyzer.logging)`)

All modules log to children of the ``"neoanalyzer"`` logger, which has one
stderr handler and is quiet (WARNING) by default.

What is logged where
--------------------
``neoanalyzer.neows``
    INFO: a feed was fetched or a saved feed was loaded.
    WARNING: a request attempt failed, or the saved feed is used instead.
``neoanalyzer.neorecord``
    DEBUG: a record was parsed, extra close approaches were ignored.
    INFO: no NEO listed for the requested date.
``neoanalyzer.bodies``
    DEBUG: two asteroids were combined.
    WARNING: a derived quantity (e.g. surface gravity of a zero-size body)
    could not be shown.

Examples
--------
    >>> import neoanalyzer
    >>> neoanalyzer.set_log_level("INFO")   # see fetches and fallbacks
    >>> neoanalyzer.set_log_level("DEBUG", handler_level="INFO")  # DEBUG to extra handlers only

Only one module::

    >>> import logging
    >>> logging.getLogger("neoanalyzer.neorecord").setLevel(logging.DEBUG)

From the command line, use ``neo-analyzer --log-level DEBUG ...``.
"""

import logging
import sys

__all__ = ["set_log_level"]

_PKG_LOGGER_NAME = "neoanalyzer"


def set_log_level(level, handler_level=None):
    """Set the level of the ``"neoanalyzer"`` logger.

    Parameters
    ----------
    level : int or str
        E.g. ``logging.DEBUG`` or ``"INFO"``.

    handler_level : int or str, optional
        If given, also set the level of the handlers attached to the package
        logger (the default stderr handler included). Useful to keep stderr
        at INFO while a file handler added by the user records DEBUG.
    """
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    logger.setLevel(level)
    if handler_level is not None:
        for h in logger.handlers:
            h.setLevel(handler_level)


class _ISO8601Formatter(logging.Formatter):
    """Local time in ISO8601, to 0.01 s."""

    def formatTime(self, record, datefmt=None):
        from datetime import datetime, timezone

        ct = datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone()
        # 2026-01-23T06:43:23.45+09:00
        return ct.strftime("%Y-%m-%dT%H:%M:%S") + f".{int(record.msecs // 10):02d}" + ct.strftime("%z")


def _setup_logger():
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(
            _ISO8601Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(logging.WARNING)
    return logger


_setup_logger()
