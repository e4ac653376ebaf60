"""Benchmarks for the Optional type.

Run with: pytest benchmarks/bench_optional.py --benchmark-only -v
"""

from pyoptional import Absent, Optional, Present
from pyoptional.codec import decode, encode

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionalCreation:
    """Benchmark Optional creation."""

    def test_of(self, benchmark):
        """Benchmark Optional.of."""
        benchmark(Optional.of, 42)

    def test_of_nullable_none(self, benchmark):
        """Benchmark Optional.of_nullable(None)."""
        benchmark(Optional.of_nullable, None)

    def test_empty(self, benchmark):
        """Benchmark Optional.empty."""
        benchmark(Optional.empty)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionalMethods:
    """Benchmark Optional method calls."""

    def test_present_map(self, benchmark):
        """Benchmark Present.map."""
        present = Optional.of(5)
        benchmark(present.map, lambda x: x * 2)

    def test_absent_map(self, benchmark):
        """Benchmark Absent.map."""
        benchmark(Absent.map, lambda x: x * 2)

    def test_present_flat_map(self, benchmark):
        """Benchmark Present.flat_map."""
        present = Optional.of(5)
        benchmark(present.flat_map, lambda x: Optional.of(x * 2))

    def test_present_or_else(self, benchmark):
        """Benchmark Present.or_else."""
        present = Optional.of(5)
        benchmark(present.or_else, 0)

    def test_absent_or_else(self, benchmark):
        """Benchmark Absent.or_else."""
        benchmark(Absent.or_else, 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionalChaining:
    """Benchmark chained Optional operations."""

    def test_present_chain_3(self, benchmark):
        """Benchmark 3-step chain on Present."""

        def chain():
            return Optional.of(5).map(lambda x: x + 1).filter(lambda x: x > 0).flat_map(lambda x: Optional.of(x - 1))

        benchmark(chain)

    def test_absent_chain_3(self, benchmark):
        """Benchmark 3-step chain on Absent (callbacks never run)."""

        def chain():
            return Absent.map(lambda x: x + 1).filter(lambda x: x > 0).flat_map(lambda x: Optional.of(x - 1))

        benchmark(chain)


# =============================================================================
# Pattern matching and codec benchmarks
# =============================================================================


class TestOptionalMatching:
    """Benchmark pattern matching on Optional."""

    def test_match_present(self, benchmark):
        """Benchmark pattern matching on Present."""
        present = Optional.of(42)

        def match_it():
            match present:
                case Present(v):
                    return v
                case _:
                    return None

        benchmark(match_it)


class TestOptionalCodec:
    """Benchmark JSON encoding and decoding."""

    def test_encode(self, benchmark):
        """Benchmark encode of a Present."""
        benchmark(encode, Optional.of({'a': 1}))

    def test_decode(self, benchmark):
        """Benchmark decode of a Present."""
        data = encode(Optional.of(42))
        benchmark(decode, data, int)
