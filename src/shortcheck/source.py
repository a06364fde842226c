"""Byte sources: the single channel all randomness flows through.

Provides the :class:`ByteReader` / :class:`ByteSource` protocols, the
NumPy-backed :class:`SeededByteSource`, the provenance-recording
:class:`TeeReader`, the fixed-content :class:`BytesReader` used to replay
shrink candidates, and :func:`resolve_seed` for choosing a run's seed.

Usage:
    >>> from shortcheck.source import SeededByteSource, TeeReader
    >>> src = SeededByteSource(42)
    >>> tee = TeeReader(src)
    >>> data = tee.read(4)
    >>> tee.consumed == data
    True
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

import numpy as np

from shortcheck.errors import EndOfInput, EntropyUnavailable, ShortRead

#: Inclusive bounds of a signed 64-bit seed.
SEED_MIN: int = -(2**63)
SEED_MAX: int = 2**63 - 1

_MASK64: int = 2**64 - 1


@runtime_checkable
class ByteReader(Protocol):
    """Anything that hands out bytes on request.

    ``read(n)`` returns at most ``n`` bytes; fewer (possibly none) means the
    reader is running dry.
    """

    def read(self, n: int) -> bytes:
        """Return up to *n* bytes."""
        ...


@runtime_checkable
class ByteSource(ByteReader, Protocol):
    """A reseedable, unbounded pseudo-random byte stream."""

    def seed(self, seed: int) -> None:
        """Restart the stream from *seed*."""
        ...


class SeededByteSource:
    """Deterministic byte stream over a NumPy ``PCG64`` generator.

    Two instances built from the same seed return identical bytes for the
    same sequence of ``read`` calls.  Negative seeds are mapped onto their
    unsigned 64-bit two's complement.
    """

    def __init__(self, seed: int = 0) -> None:
        self._rng = np.random.default_rng(seed & _MASK64)

    def seed(self, seed: int) -> None:
        self._rng = np.random.default_rng(seed & _MASK64)

    def read(self, n: int) -> bytes:
        if n <= 0:
            return b""
        return self._rng.bytes(n)


class TeeReader:
    """Wrap a reader and record every byte actually read through it."""

    def __init__(self, reader: ByteReader) -> None:
        self._reader = reader
        self._buf = bytearray()

    def read(self, n: int) -> bytes:
        data = self._reader.read(n)
        self._buf += data
        return data

    @property
    def consumed(self) -> bytes:
        """Bytes read so far (the provenance of whatever was decoded)."""
        return bytes(self._buf)


class BytesReader:
    """Serve a fixed byte string, then nothing."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read(self, n: int) -> bytes:
        if n <= 0:
            return b""
        chunk = self._data[self._pos : self._pos + n]
        self._pos += len(chunk)
        return chunk

    @property
    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self._pos


def read_exact(reader: ByteReader, n: int) -> bytes:
    """Read exactly *n* bytes from *reader*.

    Args:
        reader: Source of bytes.
        n: Number of bytes required.

    Returns:
        The *n* bytes read.

    Raises:
        EndOfInput: If the reader returned no bytes at all.
        ShortRead: If the reader returned some but fewer than *n* bytes.
    """
    data = reader.read(n)
    if n > 0 and not data:
        msg = f"wanted {n} bytes, reader is exhausted"
        raise EndOfInput(msg)
    if len(data) < n:
        raise ShortRead(wanted=n, got=len(data))
    return data


def resolve_seed(seed: int | None = None) -> int:
    """Return *seed*, or draw a fresh one from the OS entropy pool.

    Args:
        seed: Explicit signed 64-bit seed, or ``None`` to draw one.

    Returns:
        The seed to use for this run.

    Raises:
        ValueError: If *seed* lies outside the signed 64-bit range.
        EntropyUnavailable: If the OS cannot supply random bytes.
    """
    if seed is not None:
        if not SEED_MIN <= seed <= SEED_MAX:
            msg = f"seed {seed} outside the signed 64-bit range"
            raise ValueError(msg)
        return seed
    try:
        raw = secrets.token_bytes(8)
    except (OSError, NotImplementedError) as exc:
        msg = "cannot seed random source"
        raise EntropyUnavailable(msg) from exc
    return int.from_bytes(raw, "little", signed=True)
