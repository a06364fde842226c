"""Pydantic configuration for a ``check`` run.

``CheckLimits`` holds the attempt budgets; ``CheckConfig`` bundles the
generator, the property, and the optional seed and byte source.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from shortcheck.generators.base import Generator
from shortcheck.source import SEED_MAX, SEED_MIN, ByteSource

if TYPE_CHECKING:
    from shortcheck.result import Result

T = TypeVar("T")

#: Default number of sampling attempts and of shrink iterations.
DEFAULT_BUDGET: int = 10_000


class CheckLimits(BaseModel):
    """Attempt budgets for the sampling and shrinking phases.

    ``shrink_patience`` is off by default, so the shrink search always runs
    its full ``shrink_attempts`` iterations.  When set, the search stops
    after that many consecutive iterations without a new failure.
    """

    model_config = ConfigDict(frozen=True)

    initial_samples: int = Field(default=DEFAULT_BUDGET, gt=0)
    shrink_attempts: int = Field(default=DEFAULT_BUDGET, gt=0)
    shrink_patience: int | None = Field(default=None, gt=0)


class CheckConfig(BaseModel, Generic[T]):
    """Everything one ``check`` run needs.

    Attributes:
        generator: Decodes sample values from bytes.
        prop: Property under test.  Returning ``None`` or ``True`` passes;
            returning an ``Exception`` instance, raising one, or returning
            ``False`` fails.
        seed: Signed 64-bit seed.  ``None`` draws one from OS entropy.
        source: Caller-supplied byte source, reseeded before use.  ``None``
            builds a :class:`SeededByteSource`.
        limits: Attempt budgets.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    generator: Generator[T]
    prop: Callable[[T], Any]
    seed: int | None = Field(default=None, ge=SEED_MIN, le=SEED_MAX)
    source: ByteSource | None = None
    limits: CheckLimits = Field(default_factory=CheckLimits)

    def check(self) -> Result[T]:
        """Run the sampling and shrinking phases and return the result."""
        from shortcheck.check import run_check

        return run_check(self)
