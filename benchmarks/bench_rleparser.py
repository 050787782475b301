"""Benchmarks for rletext.rleparser module."""

import io
from pathlib import Path
from typing import Any

import pytest

from rletext.rleparser import RLEDecoder, rledecode


class TestRLEDecoderBenchmarks:
    """Benchmarks for the run decoder."""

    @pytest.fixture
    def many_short_runs(self) -> bytes:
        """A wide pattern made of alternating one and two cell runs."""
        row = b"bo2bo3b2o" * 7 + b"$\n"
        return b"#C generated\nx = 63, y = 200\n" + row * 200 + b"!"

    def test_iter_runs(self, benchmark: Any, many_short_runs: bytes) -> None:
        """Benchmark iter_runs() - tokenizing without expansion."""

        def parse_all_runs() -> list:
            return list(RLEDecoder(io.BytesIO(many_short_runs)).iter_runs())

        result = benchmark(parse_all_runs)
        assert len(result) > 0

    def test_rledecode_short_runs(self, benchmark: Any, many_short_runs: bytes) -> None:
        """Benchmark rledecode() - one read per input byte dominates."""
        result = benchmark(rledecode, many_short_runs)
        assert result.count(b"\n") == 200

    def test_rledecode_long_runs(self, benchmark: Any) -> None:
        """Benchmark rledecode() - expansion of very long runs."""
        data = b"100000b100000o$" * 10 + b"!"

        result = benchmark(rledecode, data)
        assert len(result) == 10 * 200001

    def test_decode_from_file(self, benchmark: Any, glider_rle: Path) -> None:
        """Benchmark decoding a real pattern file."""

        def decode_file() -> bytes:
            with open(glider_rle, "rb") as fp:
                return b"".join(RLEDecoder(fp).run())

        result = benchmark(decode_file)
        assert result == b".o.\n..o\nooo\n"
