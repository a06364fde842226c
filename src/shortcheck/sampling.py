"""Sampling loop: draw samples until the property fails or the budget ends."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from shortcheck.errors import GenerationFailed, PropertyFailed, StreamError
from shortcheck.generators.base import Generator
from shortcheck.result import Result
from shortcheck.source import ByteReader, TeeReader

logger = logging.getLogger(__name__)

T = TypeVar("T")


def evaluate(prop: Callable[[T], Any], case: T) -> Exception | None:
    """Run *prop* on *case* and return its error, or ``None`` if it passed.

    A property fails by returning an ``Exception`` instance, by raising one,
    or by returning ``False``.
    """
    try:
        outcome = prop(case)
    except Exception as exc:  # noqa: BLE001
        return exc
    if isinstance(outcome, Exception):
        return outcome
    if outcome is False:
        return PropertyFailed(f"property returned False for {case!r}")
    return None


def generate_with_provenance(generator: Generator[T], src: ByteReader) -> tuple[T, bytes]:
    """Decode one value from *src* and return it with the bytes it used.

    Raises:
        GenerationFailed: Propagated from the generator.
        StreamError: Propagated from a generator that reads with
            :func:`read_exact` without wrapping its errors.
    """
    tee = TeeReader(src)
    case = generator.generate(tee)
    return case, tee.consumed


def sample_until_failure(result: Result[T], src: ByteReader) -> None:
    """Fill *result* with samples drawn from *src*.

    Stops at the first property failure or after
    ``limits.initial_samples`` attempts.  Discarded attempts count against
    the same budget and are recorded as generator errors.
    """
    config = result.config
    budget = config.limits.initial_samples
    for attempt in range(budget):
        try:
            case, provenance = generate_with_provenance(config.generator, src)
        except (GenerationFailed, StreamError) as exc:
            logger.debug("attempt %d discarded: %s", attempt, exc)
            result.record_generator_error(exc)
            continue

        error = evaluate(config.prop, case)
        if error is not None:
            logger.info("found failing case after %d attempts: %r", attempt + 1, case)
            result.record_failure(case, error, provenance)
            return

        result.record_success(case)

    logger.info(
        "no failure in %d attempts (%d passed, %d discarded)",
        budget,
        len(result.cases.passed),
        len(result.generator_errors),
    )
