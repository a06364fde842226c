"""Generator abstract base class and core combinators.

A :class:`Generator` decodes one value from a :class:`ByteReader`.  It
signals a recoverable failure by raising :class:`GenerationFailed` (or
:class:`FilteredOut`), which the sampling and shrinking phases treat
uniformly as "discard and try again".

Every generator must consume a well-defined number of bytes for a given
input: decoding the same bytes twice yields the same value.
"""

from __future__ import annotations

import abc
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from shortcheck.errors import FilteredOut
from shortcheck.source import ByteReader

T = TypeVar("T")
U = TypeVar("U")


class Generator(abc.ABC, Generic[T]):
    """Abstract base class for all value generators.

    Generators hold no mutable state beyond captured configuration, so one
    instance may be shared across runs.
    """

    @abc.abstractmethod
    def generate(self, src: ByteReader) -> T:
        """Decode a value from *src*.

        Raises:
            GenerationFailed: If no value can be decoded from the input.
        """
        ...

    # ------------------------------------------------------------------
    # Chaining helpers
    # ------------------------------------------------------------------

    def filter(
        self,
        predicate: Callable[[T], bool],
        cause: str | Callable[[T], str] | None = None,
    ) -> Filter[T]:
        """Return a generator that rejects values failing *predicate*."""
        return Filter(self, predicate, cause)

    def map(self, fn: Callable[[T], U]) -> Map[T, U]:
        """Return a generator that applies *fn* to every generated value."""
        return Map(self, fn)


class Always(Generator[T]):
    """Ignore the input and always produce the same value (zero bytes)."""

    def __init__(self, value: T) -> None:
        self.value = value

    def generate(self, src: ByteReader) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Always({self.value!r})"


class Filter(Generator[T]):
    """Delegate to a generator and reject values failing a predicate.

    A rejected value raises :class:`FilteredOut` carrying a cause string.
    No bytes are read beyond those the wrapped generator consumed, so the
    provenance of an accepted value is exactly the wrapped generator's.

    Args:
        gen: The generator to wrap.
        predicate: Returns ``True`` for acceptable values.
        cause: Rejection message, or a callable building one from the
            rejected value.  Defaults to naming the predicate and value.
    """

    def __init__(
        self,
        gen: Generator[T],
        predicate: Callable[[T], bool],
        cause: str | Callable[[T], str] | None = None,
    ) -> None:
        self.gen = gen
        self.predicate = predicate
        self.cause = cause

    def generate(self, src: ByteReader) -> T:
        value = self.gen.generate(src)
        if not self.predicate(value):
            raise FilteredOut(self._cause_for(value))
        return value

    def _cause_for(self, value: T) -> str:
        if callable(self.cause):
            return self.cause(value)
        if self.cause is not None:
            return self.cause
        name = getattr(self.predicate, "__name__", repr(self.predicate))
        return f"{name} rejected {value!r}"

    def __repr__(self) -> str:
        return f"Filter({self.gen!r}, {self.predicate!r})"


class Map(Generator[U], Generic[T, U]):
    """Apply a pure function to the values of another generator."""

    def __init__(self, gen: Generator[T], fn: Callable[[T], U]) -> None:
        self.gen = gen
        self.fn = fn

    def generate(self, src: ByteReader) -> U:
        return self.fn(self.gen.generate(src))


class Tuples(Generator[tuple[Any, ...]]):
    """Run several generators in sequence and collect their values.

    The provenance of a tuple is the concatenation of its parts' bytes; a
    failure in any part fails the whole tuple.
    """

    def __init__(self, *gens: Generator[Any]) -> None:
        self.gens = gens

    def generate(self, src: ByteReader) -> tuple[Any, ...]:
        return tuple(gen.generate(src) for gen in self.gens)


def always(value: T) -> Always[T]:
    """Return a generator that always yields *value*."""
    return Always(value)
