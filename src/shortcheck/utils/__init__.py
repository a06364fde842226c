"""Shared utilities module."""

from __future__ import annotations

from shortcheck.utils.logger import (
    DEBUG,
    NORMAL,
    QUIET,
    VERBOSE,
    configure_logging,
    get_logger,
    resolve_level,
)

__all__ = [
    "DEBUG",
    "NORMAL",
    "QUIET",
    "VERBOSE",
    "configure_logging",
    "get_logger",
    "resolve_level",
]
