"""Tests for the fluent Stream wrapper."""

import pytest
from fnseq import MissingArgumentError, Nothing, Some, Stream


class TestStreamBasic:
    """Tests for construction and iteration."""

    def test_is_frozen(self):
        stream = Stream([1, 2, 3])
        with pytest.raises(AttributeError):
            stream.source = []  # type: ignore[misc]

    def test_iteration(self):
        assert list(Stream([1, 2, 3])) == [1, 2, 3]

    def test_repr(self):
        assert repr(Stream([1])) == 'Stream([1])'


class TestStreamConstructors:
    """Tests for the classmethod constructors."""

    def test_unfold(self):
        countdown = Stream.unfold(lambda n: Some((n, n - 1)) if n > 0 else Nothing, 3)
        assert countdown.to_list() == [3, 2, 1]

    def test_initialize_infinite(self):
        assert Stream.initialize_infinite(lambda i: i * i).truncate(4).to_list() == [0, 1, 4, 9, 16]

    def test_singleton(self):
        assert Stream.singleton('x').to_list() == ['x']
        assert Stream.singleton().to_list() == [None]


class TestStreamTransforms:
    """Tests for lazy transform methods."""

    def test_windowed_then_map(self):
        assert Stream([1, 2, 3, 4]).windowed(2).map(sum).to_list() == [3, 5, 7]

    def test_pairwise_then_filter(self):
        result = Stream([1, 3, 2, 5]).pairwise().filter(lambda p: p[0] < p[1]).to_list()
        assert result == [(1, 3), (2, 5)]

    def test_collect(self):
        assert Stream(['ab', 'c']).collect(list).to_list() == ['a', 'b', 'c']

    def test_zip_and_zip3(self):
        assert Stream([1, 2, 3]).zip('ab').to_list() == [(1, 'a'), (2, 'b')]
        assert Stream([1, 2]).zip3('ab', [True]).to_list() == [(1, 'a', True)]

    def test_transforms_are_lazy(self, tracked):
        source = tracked()
        stream = Stream(source).pairwise().windowed(2)
        assert source.pulled == 0
        assert stream.first() == Some([(0, 1), (1, 2)])

    def test_errors_surface_at_chain_time(self):
        with pytest.raises(MissingArgumentError):
            Stream(None).pairwise()


class TestStreamTerminals:
    """Tests for terminal methods."""

    def test_nth_and_item(self):
        assert Stream([10, 20, 30]).nth(1) == Some(20)
        assert Stream([10, 20, 30]).nth(9) == Nothing
        assert Stream([10, 20, 30]).item(2) == 30
        with pytest.raises(IndexError):
            Stream([10]).item(1)

    def test_first(self):
        assert Stream([1, 2]).first() == Some(1)
        assert Stream([]).first() == Nothing

    def test_first_closes_upstream(self, tracked):
        """Stopping after the first element closes every wrapped iterator."""
        source = tracked()
        assert Stream(source).pairwise().first() == Some((0, 1))
        assert source.pulled == 2
        assert source.closed

    def test_first_on_empty_closes_upstream(self, tracked):
        source = tracked([])
        assert Stream(source).first() == Nothing
        assert source.closed

    def test_forall_exists(self):
        assert Stream([2, 4]).forall(lambda x: x % 2 == 0)
        assert Stream([1, 4]).exists(lambda x: x == 4)

    def test_iter(self):
        seen = []
        Stream('ab').iter(seen.append)
        assert seen == ['a', 'b']

    def test_two_sequence_terminals(self):
        assert Stream([1, 2]).forall2([2, 3], lambda a, b: a < b)
        assert Stream([1, 2]).exists2([0, 2], lambda a, b: a == b)
        seen = []
        Stream([1, 2]).iter2('xy', lambda a, b: seen.append(f'{a}{b}'))
        assert seen == ['1x', '2y']
