"""Benchmarks for sequence combinators.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from fnseq import Nothing, Some, Stream, initialize_infinite, nth, pairwise, truncate, unfold, windowed, zip

DATA = list(range(10_000))


# =============================================================================
# Generator benchmarks
# =============================================================================


class TestGenerators:
    """Benchmark sequence sources."""

    def test_unfold_countdown(self, benchmark):
        """Benchmark draining a finite unfold."""

        def run():
            return list(unfold(lambda n: Some((n, n - 1)) if n > 0 else Nothing, 1_000))

        benchmark(run)

    def test_initialize_infinite_prefix(self, benchmark):
        """Benchmark taking a prefix of an infinite sequence."""
        benchmark(lambda: list(truncate(initialize_infinite(lambda i: i * i), 999)))


# =============================================================================
# Consumer benchmarks
# =============================================================================


class TestConsumers:
    """Benchmark single-source operations."""

    def test_pairwise(self, benchmark):
        """Benchmark pairwise over a list."""
        benchmark(lambda: list(pairwise(DATA)))

    def test_windowed(self, benchmark):
        """Benchmark windowed with a small window."""
        benchmark(lambda: list(windowed(DATA, 5)))

    def test_nth_sequence(self, benchmark):
        """Benchmark nth on a list (direct indexing)."""
        benchmark(nth, DATA, 9_999)

    def test_nth_iterator(self, benchmark):
        """Benchmark nth on a plain iterator (advances element by element)."""
        benchmark(lambda: nth(iter(DATA), 9_999))


# =============================================================================
# Lockstep and Stream benchmarks
# =============================================================================


class TestLockstep:
    """Benchmark lockstep traversal and the Stream wrapper."""

    def test_zip(self, benchmark):
        """Benchmark zip over two lists."""
        benchmark(lambda: list(zip(DATA, DATA)))

    def test_stream_chain(self, benchmark):
        """Benchmark a fluent Stream chain."""
        benchmark(lambda: Stream(DATA).windowed(3).map(sum).filter(lambda s: s % 2 == 0).to_list())
