"""Exception hierarchy for the sampling and shrinking engine.

Generation-layer errors (:class:`GenerationFailed`, :class:`FilteredOut`,
:class:`ShrinkDrawError`) are recoverable: the engine records them as
diagnostics and keeps going.  :class:`EntropyUnavailable` is fatal only when
it prevents choosing the initial seed.
"""

from __future__ import annotations


class CheckError(Exception):
    """Base class for every error raised by ``shortcheck``."""


# ---------------------------------------------------------------------------
# Stream errors
# ---------------------------------------------------------------------------


class StreamError(CheckError):
    """A byte reader could not supply the requested bytes."""


class EndOfInput(StreamError, EOFError):
    """The reader had no bytes left at all."""


class ShortRead(StreamError):
    """The reader ran dry part-way through a read."""

    def __init__(self, wanted: int, got: int) -> None:
        self.wanted = wanted
        self.got = got
        super().__init__(f"read {got} bytes not {wanted}")


# ---------------------------------------------------------------------------
# Generation errors
# ---------------------------------------------------------------------------


class GenerationFailed(CheckError):
    """A generator could not decode a value from its input.

    The caller discards the attempt and may retry with fresh bytes.
    """


class FilteredOut(GenerationFailed):
    """A generated value was rejected by a filter predicate."""

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"{cause}: filtered out")


# ---------------------------------------------------------------------------
# Property and engine errors
# ---------------------------------------------------------------------------


class PropertyFailed(CheckError):
    """A property returned ``False`` for a generated value."""


class EntropyUnavailable(CheckError):
    """The secure random source could not supply the bytes needed."""


class ShrinkDrawError(CheckError):
    """No shrink candidate could be drawn below a failure's provenance."""

    def __init__(self, provenance: bytes) -> None:
        self.provenance = provenance
        super().__init__(f"failed to sample input smaller than {provenance.hex() or '<empty>'}")
