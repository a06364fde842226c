"""Generator capability, combinators, and primitive decoders."""

from __future__ import annotations

from shortcheck.generators.base import Always, Filter, Generator, Map, Tuples, always
from shortcheck.generators.primitives import Bool, Bytes, Int

__all__ = [
    "Always",
    "Bool",
    "Bytes",
    "Filter",
    "Generator",
    "Int",
    "Map",
    "Tuples",
    "always",
]
