"""Primitive generators that decode values directly from bytes.

These are ordinary users of the :class:`Generator` contract.  Each reads a
fixed or explicitly length-prefixed number of bytes and raises
:class:`GenerationFailed`, chained from the underlying
:class:`EndOfInput` / :class:`ShortRead`, when the input runs out.  None of
them pads short input.
"""

from __future__ import annotations

from shortcheck.errors import GenerationFailed, StreamError
from shortcheck.generators.base import Generator
from shortcheck.source import ByteReader, read_exact

#: Width of a machine ``int`` in the default integer encoding.
INT_WIDTH: int = 8


class Int(Generator[int]):
    """Decode a big-endian two's complement integer of fixed width.

    Args:
        width: Number of bytes consumed per value.
        signed: Interpret the top bit as a sign bit.
    """

    def __init__(self, width: int = INT_WIDTH, *, signed: bool = True) -> None:
        if width < 1:
            msg = f"width must be positive, got {width}"
            raise ValueError(msg)
        self.width = width
        self.signed = signed

    def generate(self, src: ByteReader) -> int:
        try:
            raw = read_exact(src, self.width)
        except StreamError as exc:
            msg = f"failed to generate int: {exc}"
            raise GenerationFailed(msg) from exc
        return int.from_bytes(raw, "big", signed=self.signed)

    def __repr__(self) -> str:
        return f"Int(width={self.width}, signed={self.signed})"


class Bool(Generator[bool]):
    """Decode one byte as a boolean: even bytes are ``True``."""

    def generate(self, src: ByteReader) -> bool:
        try:
            (byte,) = read_exact(src, 1)
        except StreamError as exc:
            msg = f"failed to generate bool: {exc}"
            raise GenerationFailed(msg) from exc
        return byte % 2 == 0

    def __repr__(self) -> str:
        return "Bool()"


class Bytes(Generator[bytes]):
    """Decode a length-prefixed byte string.

    One prefix byte gives the length (reduced modulo ``max_length + 1``),
    followed by exactly that many payload bytes.
    """

    def __init__(self, max_length: int = 255) -> None:
        if not 0 <= max_length <= 255:
            msg = f"max_length must be in [0, 255], got {max_length}"
            raise ValueError(msg)
        self.max_length = max_length

    def generate(self, src: ByteReader) -> bytes:
        try:
            (prefix,) = read_exact(src, 1)
            length = prefix % (self.max_length + 1)
            return read_exact(src, length)
        except StreamError as exc:
            msg = f"failed to generate bytes: {exc}"
            raise GenerationFailed(msg) from exc

    def __repr__(self) -> str:
        return f"Bytes(max_length={self.max_length})"
