"""Unit tests for byte sources, readers, and seed resolution."""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from shortcheck.errors import EndOfInput, EntropyUnavailable, ShortRead
from shortcheck.source import (
    SEED_MAX,
    SEED_MIN,
    ByteSource,
    BytesReader,
    SeededByteSource,
    TeeReader,
    read_exact,
    resolve_seed,
)

seeds = st.integers(min_value=SEED_MIN, max_value=SEED_MAX)


@pytest.mark.unit
class TestSeededByteSource:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(SeededByteSource(1), ByteSource)

    def test_read_returns_requested_length(self) -> None:
        assert len(SeededByteSource(1).read(17)) == 17

    def test_non_positive_read_is_empty(self) -> None:
        src = SeededByteSource(1)
        assert src.read(0) == b""
        assert src.read(-3) == b""

    def test_reseed_restarts_stream(self) -> None:
        src = SeededByteSource(5)
        first = src.read(32)
        src.read(100)
        src.seed(5)
        assert src.read(32) == first

    def test_different_seeds_differ(self) -> None:
        assert SeededByteSource(1).read(32) != SeededByteSource(2).read(32)

    def test_negative_seed_accepted(self) -> None:
        assert SeededByteSource(-1).read(8) == SeededByteSource(2**64 - 1).read(8)


@pytest.mark.property
@settings(max_examples=50)
@given(seed=seeds, sizes=st.lists(st.integers(min_value=0, max_value=64), max_size=10))
def test_same_seed_same_call_sequence_same_bytes(seed: int, sizes: list[int]) -> None:
    """Two streams built from one seed agree on every read."""
    a, b = SeededByteSource(seed), SeededByteSource(seed)
    for size in sizes:
        assert a.read(size) == b.read(size)


@pytest.mark.unit
class TestTeeReader:
    def test_records_bytes_read(self) -> None:
        tee = TeeReader(BytesReader(b"abcdef"))
        tee.read(2)
        tee.read(3)
        assert tee.consumed == b"abcde"

    def test_records_only_what_was_available(self) -> None:
        tee = TeeReader(BytesReader(b"ab"))
        assert tee.read(5) == b"ab"
        assert tee.consumed == b"ab"

    def test_starts_empty(self) -> None:
        assert TeeReader(BytesReader(b"xyz")).consumed == b""


@pytest.mark.unit
class TestBytesReader:
    def test_serves_then_runs_dry(self) -> None:
        reader = BytesReader(b"\x01\x02\x03")
        assert reader.read(2) == b"\x01\x02"
        assert reader.remaining == 1
        assert reader.read(2) == b"\x03"
        assert reader.read(1) == b""


@pytest.mark.unit
class TestReadExact:
    def test_exact_read(self) -> None:
        assert read_exact(BytesReader(b"\x01\x02"), 2) == b"\x01\x02"

    def test_zero_bytes_from_empty_reader(self) -> None:
        assert read_exact(BytesReader(b""), 0) == b""

    def test_empty_reader_raises_end_of_input(self) -> None:
        with pytest.raises(EndOfInput):
            read_exact(BytesReader(b""), 1)

    def test_end_of_input_is_eof_error(self) -> None:
        with pytest.raises(EOFError):
            read_exact(BytesReader(b""), 4)

    def test_partial_reader_raises_short_read(self) -> None:
        with pytest.raises(ShortRead, match="read 3 bytes not 8") as info:
            read_exact(BytesReader(b"abc"), 8)
        assert info.value.wanted == 8
        assert info.value.got == 3


@pytest.mark.unit
class TestResolveSeed:
    def test_explicit_seed_returned(self) -> None:
        assert resolve_seed(-42) == -42

    @pytest.mark.parametrize("seed", [SEED_MIN - 1, SEED_MAX + 1])
    def test_out_of_range_seed_rejected(self, seed: int) -> None:
        with pytest.raises(ValueError, match="signed 64-bit"):
            resolve_seed(seed)

    def test_drawn_seed_in_range(self) -> None:
        seed = resolve_seed()
        assert SEED_MIN <= seed <= SEED_MAX

    def test_drawn_seed_decodes_little_endian(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("shortcheck.source.secrets.token_bytes", lambda n: b"\x01" + b"\x00" * (n - 1))
        assert resolve_seed() == 1

    def test_entropy_failure_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _broken(n: int) -> bytes:
            raise OSError("no entropy")

        monkeypatch.setattr("shortcheck.source.secrets.token_bytes", _broken)
        with pytest.raises(EntropyUnavailable, match="cannot seed"):
            resolve_seed()
