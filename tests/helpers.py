"""Scripted byte sources and canned properties shared by the test suite."""

from __future__ import annotations

from shortcheck.generators import Generator
from shortcheck.source import ByteReader, read_exact


class RepeatingSource:
    """Byte source that serves one byte pattern forever.

    Records every seed it is given so tests can check reseeding.
    """

    def __init__(self, pattern: bytes) -> None:
        self.pattern = pattern
        self.seeds: list[int] = []
        self._pos = 0

    def seed(self, seed: int) -> None:
        self.seeds.append(seed)
        self._pos = 0

    def read(self, n: int) -> bytes:
        out = bytearray()
        for _ in range(n):
            out.append(self.pattern[self._pos % len(self.pattern)])
            self._pos += 1
        return bytes(out)


def always_fails(_: object) -> None:
    """Property that rejects every value."""
    msg = "always fails"
    raise AssertionError(msg)


def always_passes(_: object) -> None:
    """Property that accepts every value."""


class LeadingByteOfPair(Generator[int]):
    """Read two bytes with :func:`read_exact` and keep the first.

    Leaves stream errors unwrapped, as a hand-written generator might.
    """

    def generate(self, src: ByteReader) -> int:
        return read_exact(src, 2)[0]
