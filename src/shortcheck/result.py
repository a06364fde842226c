"""Case bookkeeping: failures, recorded cases, and the run result.

A :class:`Result` is created once per ``check`` call, filled in by the
sampling and shrinking phases, and handed back to the caller when the run
is over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from shortcheck.config import CheckConfig

T = TypeVar("T")


@dataclass(frozen=True)
class Failure(Generic[T]):
    """A sampled value the property rejected.

    Attributes:
        case: The failing value.
        error: What the property raised (or :class:`PropertyFailed` when it
            returned ``False``).
        provenance: The exact bytes the generator consumed to produce
            ``case``.  Replaying them reproduces the value.
    """

    case: T
    error: Exception
    provenance: bytes

    @property
    def magnitude(self) -> int:
        """The provenance read as a non-negative big-endian integer."""
        return int.from_bytes(self.provenance, "big")


@dataclass
class Cases(Generic[T]):
    """Accepted values (discovery order) and failures."""

    passed: list[T] = field(default_factory=list)
    failed: list[Failure[T]] = field(default_factory=list)


@dataclass
class Result(Generic[T]):
    """Outcome of one ``check`` run.

    Attributes:
        config: The configuration the run was started with.
        seed: The seed the byte source was (re)seeded with.
        generator_errors: Diagnostics from discarded attempts and failed
            shrink draws.  Not part of the verdict.
        cases: Passed values and failures.  After the run, ``cases.failed``
            lists the simplest failure first and the original last.
    """

    config: CheckConfig[T]
    seed: int
    generator_errors: list[Exception] = field(default_factory=list)
    cases: Cases[T] = field(default_factory=Cases)

    @property
    def passed(self) -> bool:
        """``True`` when no failure was found."""
        return not self.failed

    @property
    def failed(self) -> bool:
        """``True`` when at least one failure was found."""
        return len(self.cases.failed) > 0

    @property
    def simplest(self) -> Failure[T] | None:
        """The most deeply shrunk failure, or ``None`` for a passing run.

        Only meaningful once the run has finished: until
        :meth:`reverse_failures` runs, index 0 holds the original failure.
        """
        return self.cases.failed[0] if self.cases.failed else None

    @property
    def latest_failure(self) -> Failure[T]:
        """The most recently recorded failure (the shrink starting point)."""
        return self.cases.failed[-1]

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record_success(self, case: T) -> None:
        self.cases.passed.append(case)

    def record_failure(self, case: T, error: Exception, provenance: bytes) -> None:
        self.cases.failed.append(Failure(case, error, bytes(provenance)))

    def record_generator_error(self, error: Exception) -> None:
        self.generator_errors.append(error)

    def reverse_failures(self) -> None:
        """Reorder failures simplest-first; leaves everything else alone."""
        self.cases.failed.reverse()
