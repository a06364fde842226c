"""Logging setup for the ``shortcheck`` logger hierarchy.

The engine logs through standard-library loggers named after its modules
(``shortcheck.check``, ``shortcheck.shrink``, ...).  Nothing is printed
until an application calls :func:`configure_logging`.

Verbosity names map onto log levels as follows:

    ========  ==============  =====
    Name      Python level    Value
    ========  ==============  =====
    QUIET     WARNING          30
    NORMAL    INFO             20
    VERBOSE   VERBOSE (custom) 15
    DEBUG     DEBUG            10
    ========  ==============  =====

At NORMAL a run logs its seed and verdict; VERBOSE adds one line per
shrink improvement; DEBUG adds every discarded sampling attempt.

Usage:
    >>> from shortcheck.utils.logger import configure_logging
    >>> configure_logging("VERBOSE")

The ``SHORTCHECK_LOG_LEVEL`` environment variable (case-insensitive) is
consulted when no explicit level is passed.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

VERBOSE: int = 15
"""Shrink-progress level, between INFO and DEBUG."""

logging.addLevelName(VERBOSE, "VERBOSE")

QUIET: int = logging.WARNING
NORMAL: int = logging.INFO
DEBUG: int = logging.DEBUG

_LEVEL_MAP: dict[str, int] = {
    "QUIET": QUIET,
    "NORMAL": NORMAL,
    "VERBOSE": VERBOSE,
    "DEBUG": DEBUG,
}

_ROOT_LOGGER_NAME: str = "shortcheck"
_ENV_VAR: str = "SHORTCHECK_LOG_LEVEL"
_LOG_FORMAT: str = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Translate a verbosity name into a numeric log level.

    Falls back to ``SHORTCHECK_LOG_LEVEL`` and then to ``"NORMAL"`` when
    *level* is ``None``.

    Raises:
        ValueError: If the resolved name is not a known verbosity.
    """
    resolved = level if level is not None else os.environ.get(_ENV_VAR, "NORMAL")
    try:
        return _LEVEL_MAP[resolved.upper()]
    except KeyError:
        msg = f"Unknown log level {resolved!r}. Valid levels: {', '.join(sorted(_LEVEL_MAP))}"
        raise ValueError(msg) from None


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Attach a single stream handler to the ``shortcheck`` root logger.

    Calling it again replaces the previous handler instead of adding a
    second one.

    Args:
        level: ``"QUIET"``, ``"NORMAL"``, ``"VERBOSE"`` or ``"DEBUG"``
            (case-insensitive), or ``None`` to use the environment.
        stream: Where to write records.  Defaults to ``sys.stderr``.

    Raises:
        ValueError: If the level name is not recognised.
    """
    numeric_level = resolve_level(level)

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)

    # Records stop at our root; the Python root logger never sees them.
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return ``shortcheck.<name>``.

    Example:
        >>> get_logger("shrink").name
        'shortcheck.shrink'
    """
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
