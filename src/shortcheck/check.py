"""Run orchestration: seed resolution, sampling, shrinking, reordering.

Provides :func:`check`, the keyword-argument entry point, and
:func:`run_check`, which executes a prebuilt :class:`CheckConfig`.

Usage:
    >>> from shortcheck import Int, check
    >>> result = check(Int(), lambda n: n % 2 == 0, seed=1)
    >>> result.failed
    True
    >>> result.simplest.case % 2
    1
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from shortcheck.config import CheckConfig, CheckLimits
from shortcheck.generators.base import Generator
from shortcheck.result import Result
from shortcheck.sampling import sample_until_failure
from shortcheck.shrink import seek_simpler
from shortcheck.source import ByteSource, BytesReader, SeededByteSource, resolve_seed

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _prepare_source(config: CheckConfig[Any], seed: int) -> ByteSource:
    """Reseed the caller's source, or build a default one."""
    if config.source is not None:
        config.source.seed(seed)
        return config.source
    return SeededByteSource(seed)


def run_check(config: CheckConfig[T]) -> Result[T]:
    """Execute one run described by *config*.

    Raises:
        EntropyUnavailable: If no seed was configured and the OS entropy
            pool cannot supply one.
    """
    seed = resolve_seed(config.seed)
    logger.info("checking %r with seed %d", config.generator, seed)

    result: Result[T] = Result(config=config, seed=seed)
    src = _prepare_source(config, seed)
    sample_until_failure(result, src)
    seek_simpler(result, src)
    result.reverse_failures()

    logger.info(
        "verdict: %s (%d passed, %d failed, %d generator errors)",
        "passed" if result.passed else "failed",
        len(result.cases.passed),
        len(result.cases.failed),
        len(result.generator_errors),
    )
    return result


def check(  # noqa: PLR0913
    generator: Generator[T],
    prop: Callable[[T], Any],
    *,
    seed: int | None = None,
    source: ByteSource | None = None,
    initial_samples: int | None = None,
    shrink_attempts: int | None = None,
    shrink_patience: int | None = None,
) -> Result[T]:
    """Search for a counterexample to *prop* and shrink it.

    Args:
        generator: Decodes sample values from bytes.
        prop: Property under test.  Returning ``None`` or ``True`` passes;
            returning an ``Exception`` instance, raising one, or returning
            ``False`` fails.
        seed: Signed 64-bit seed.  ``None`` draws one from OS entropy.
        source: Byte source to reseed and use instead of the default.
        initial_samples: Sampling attempt budget (default 10,000).
        shrink_attempts: Shrink iteration budget (default 10,000).
        shrink_patience: Stop shrinking after this many consecutive
            iterations without progress.  ``None`` runs the full budget.

    Returns:
        The run's :class:`Result`.

    Raises:
        pydantic.ValidationError: If an option is out of range.
        EntropyUnavailable: If no seed was given and none can be drawn.
    """
    overrides = {
        name: value
        for name, value in (
            ("initial_samples", initial_samples),
            ("shrink_attempts", shrink_attempts),
            ("shrink_patience", shrink_patience),
        )
        if value is not None
    }
    config: CheckConfig[T] = CheckConfig(
        generator=generator,
        prop=prop,
        seed=seed,
        source=source,
        limits=CheckLimits(**overrides),
    )
    return run_check(config)


def replay(generator: Generator[T], provenance: bytes) -> T:
    """Decode a value from recorded provenance bytes.

    Raises:
        GenerationFailed: If the bytes no longer decode with *generator*.
    """
    return generator.generate(BytesReader(provenance))
