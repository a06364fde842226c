"""Shared pytest fixtures for the shortcheck test suite.

Fixtures defined here are available to all tests without explicit imports.
Plain helpers (scripted sources, canned properties) live in
``tests/helpers.py``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from tests.helpers import RepeatingSource


@pytest.fixture
def eights_source() -> RepeatingSource:
    """Return a source that yields ``0x08`` forever."""
    return RepeatingSource(b"\x08")


@pytest.fixture
def propagating_logs() -> Iterator[None]:
    """Let ``shortcheck`` records reach pytest's ``caplog`` handler."""
    root = logging.getLogger("shortcheck")
    previous = root.propagate
    root.propagate = True
    yield
    root.propagate = previous
