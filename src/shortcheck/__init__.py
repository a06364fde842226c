"""shortcheck: property-based testing over a shrinkable byte stream."""

from __future__ import annotations

from shortcheck.check import check, replay, run_check
from shortcheck.config import DEFAULT_BUDGET, CheckConfig, CheckLimits
from shortcheck.errors import (
    CheckError,
    EndOfInput,
    EntropyUnavailable,
    FilteredOut,
    GenerationFailed,
    PropertyFailed,
    ShortRead,
    ShrinkDrawError,
    StreamError,
)
from shortcheck.generators import (
    Always,
    Bool,
    Bytes,
    Filter,
    Generator,
    Int,
    Map,
    Tuples,
    always,
)
from shortcheck.result import Cases, Failure, Result
from shortcheck.source import ByteReader, ByteSource, BytesReader, SeededByteSource, TeeReader

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BUDGET",
    "Always",
    "Bool",
    "ByteReader",
    "ByteSource",
    "Bytes",
    "BytesReader",
    "Cases",
    "CheckConfig",
    "CheckError",
    "CheckLimits",
    "EndOfInput",
    "EntropyUnavailable",
    "Failure",
    "Filter",
    "FilteredOut",
    "GenerationFailed",
    "Generator",
    "Int",
    "Map",
    "PropertyFailed",
    "Result",
    "SeededByteSource",
    "ShortRead",
    "ShrinkDrawError",
    "StreamError",
    "TeeReader",
    "Tuples",
    "always",
    "check",
    "replay",
    "run_check",
]
