"""Pytest configuration and shared fixtures for fnseq tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest


class TrackedSource:
    """Iterator that records how many elements were pulled and whether it was closed.

    With values=None it is infinite and yields 0, 1, 2, ...
    """

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._values = list(values) if values is not None else None
        self.pulled = 0
        self.closed = False

    def __iter__(self) -> TrackedSource:
        return self

    def __next__(self) -> int:
        if self.closed:
            raise StopIteration
        if self._values is None:
            value = self.pulled
        elif self.pulled < len(self._values):
            value = self._values[self.pulled]
        else:
            raise StopIteration
        self.pulled += 1
        return value

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def tracked() -> Callable[..., TrackedSource]:
    """Factory for TrackedSource iterators."""
    return TrackedSource


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from fnseq import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from fnseq import Nothing

    return Nothing
