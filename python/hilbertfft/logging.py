"""Logging for hilbertfft.

Module loggers are children of the ``hilbertfft`` package logger, which
owns the only handler. The package logs at DEBUG only, so nothing is
printed unless a caller lowers the level with set_log_level().
"""

import logging
import sys
from typing import Optional, Union

PACKAGE = "hilbertfft"

_package_logger = logging.getLogger(PACKAGE)
if not _package_logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    _package_logger.addHandler(_handler)
    _package_logger.setLevel(logging.WARNING)
    _package_logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``hilbertfft`` namespace.

    Args:
        name: Module name (typically ``__name__``). None gives the
            package logger.
    """
    if name is None or name == PACKAGE:
        return _package_logger
    if not name.startswith(PACKAGE + "."):
        name = f"{PACKAGE}.{name}"
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of the package logger and so of all module loggers.

    Args:
        level: ``logging.DEBUG`` style int or a level name like ``"DEBUG"``.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    _package_logger.setLevel(level)
