"""Shrink search: look for failures with numerically smaller provenance.

Each iteration reads the most recently recorded failure's provenance as a
big-endian integer ``M``, draws a uniform ``X`` in ``[0, M)`` from the run's
byte source, and decodes a new case from exactly the minimal big-endian
encoding of ``X``.  A case that still fails is appended to the failure list
and becomes the starting point of the next iteration.

The search runs a fixed number of iterations whether or not it appears to
have converged.  ``CheckLimits.shrink_patience`` can opt into stopping
early.

"Numerically smaller provenance" is only a heuristic for "simpler value":
a generator that treats the top bit as a sign, for instance, may decode a
smaller byte string into a larger-magnitude value.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from shortcheck.errors import EntropyUnavailable, GenerationFailed, ShrinkDrawError, StreamError
from shortcheck.result import Result
from shortcheck.sampling import evaluate
from shortcheck.source import ByteReader, BytesReader, read_exact
from shortcheck.utils.logger import VERBOSE

logger = logging.getLogger(__name__)

T = TypeVar("T")


def draw_below(src: ByteReader, bound: int) -> int:
    """Draw a uniform integer in ``[0, bound)`` by rejection sampling.

    Reads just enough bytes from *src* to cover the bit length of
    ``bound - 1``, masks the excess high bits, and retries until the value
    falls below *bound*.

    Args:
        src: Source of random bytes.
        bound: Exclusive upper bound; must be positive.

    Returns:
        The drawn integer.

    Raises:
        ValueError: If *bound* is not positive.
        EntropyUnavailable: If *src* runs out of bytes.
    """
    if bound <= 0:
        msg = f"bound must be positive, got {bound}"
        raise ValueError(msg)

    bit_len = (bound - 1).bit_length()
    if bit_len == 0:
        return 0

    n_bytes = (bit_len + 7) // 8
    top_bits = bit_len % 8 or 8
    top_mask = (1 << top_bits) - 1
    while True:
        try:
            raw = bytearray(read_exact(src, n_bytes))
        except StreamError as exc:
            msg = f"random source exhausted while drawing below {bound}"
            raise EntropyUnavailable(msg) from exc
        raw[0] &= top_mask
        value = int.from_bytes(raw, "big")
        if value < bound:
            return value


def to_minimal_bytes(value: int) -> bytes:
    """Encode a non-negative integer as minimal-length big-endian bytes.

    Zero encodes as the empty byte string.
    """
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def shorter(provenance: bytes, src: ByteReader) -> bytes:
    """Return a byte string numerically smaller than *provenance*.

    Raises:
        ShrinkDrawError: If *provenance* is zero-valued (nothing lies below
            it) or *src* cannot supply the draw.
    """
    bound = int.from_bytes(provenance, "big")
    if bound == 0:
        raise ShrinkDrawError(provenance)
    try:
        return to_minimal_bytes(draw_below(src, bound))
    except EntropyUnavailable as exc:
        raise ShrinkDrawError(provenance) from exc


def seek_one_simpler(result: Result[T], src: ByteReader) -> bool:
    """Run a single shrink iteration.

    Returns:
        ``True`` if a new, smaller failure was recorded.
    """
    config = result.config
    current = result.latest_failure

    try:
        candidate = shorter(current.provenance, src)
    except ShrinkDrawError as exc:
        result.record_generator_error(exc)
        return False

    try:
        case = config.generator.generate(BytesReader(candidate))
    except (GenerationFailed, StreamError):
        return False

    error = evaluate(config.prop, case)
    if error is None:
        result.record_success(case)
        return False

    logger.log(VERBOSE, "shrunk to %r (provenance %s)", case, candidate.hex() or "<empty>")
    result.record_failure(case, error, candidate)
    return True


def seek_simpler(result: Result[T], src: ByteReader) -> None:
    """Run the shrink search on a result holding at least one failure.

    Does nothing for a passing result.
    """
    if not result.cases.failed:
        return

    limits = result.config.limits
    patience = limits.shrink_patience
    misses = 0
    for iteration in range(limits.shrink_attempts):
        if seek_one_simpler(result, src):
            misses = 0
            continue
        misses += 1
        if patience is not None and misses >= patience:
            logger.debug("stopping shrink after %d iterations without progress", iteration + 1)
            break

    logger.info(
        "shrink finished: %d failures recorded, simplest provenance %s",
        len(result.cases.failed),
        result.latest_failure.provenance.hex() or "<empty>",
    )
