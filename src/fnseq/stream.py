"""Fluent wrapper over the fnseq sequence functions.

Example:
    ```python
    from fnseq import Stream

    Stream([1, 2, 3, 4]).windowed(2).map(sum).to_list()  # [3, 5, 7]
    Stream.initialize_infinite(lambda i: i * i).truncate(3).to_list()  # [0, 1, 4, 9]
    Stream('abc').nth(1)  # Some(value='b')
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

import msgspec

from fnseq.option import Nothing, Option, Some
from fnseq.seq import consumers, generators, lockstep
from fnseq.seq._resources import acquire

__all__ = ['Stream']


class Stream(msgspec.Struct, frozen=True, gc=False):
    """Chainable view over an iterable.

    Transform methods return a new Stream and stay lazy. Terminal methods
    consume the underlying iterator, so a Stream over a generator can be
    consumed once.
    """

    source: Iterable[Any]

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def unfold(cls, generator: Callable[[Any], Option[tuple[Any, Any]]], seed: Any) -> Stream:
        """Stream over `unfold(generator, seed)`."""
        return cls(generators.unfold(generator, seed))

    @classmethod
    def initialize_infinite(cls, func: Callable[[int], Any]) -> Stream:
        """Stream over func(0), func(1), ..."""
        return cls(generators.initialize_infinite(func))

    @classmethod
    def singleton(cls, value: Any = None) -> Stream:
        return cls(generators.singleton(value))

    # =========================================================================
    # Lazy transforms
    # =========================================================================

    def truncate(self, count: int) -> Stream:
        """Keep the first count + 1 elements (see `fnseq.truncate`)."""
        return Stream(consumers.truncate(self.source, count))

    def pairwise(self) -> Stream:
        return Stream(consumers.pairwise(self.source))

    def windowed(self, window_size: int) -> Stream:
        return Stream(consumers.windowed(self.source, window_size))

    def collect(self, func: Callable[[Any], Iterable[Any]]) -> Stream:
        return Stream(consumers.collect(self.source, func))

    def zip(self, other: Iterable[Any]) -> Stream:
        return Stream(lockstep.zip(self.source, other))

    def zip3(self, second: Iterable[Any], third: Iterable[Any]) -> Stream:
        return Stream(lockstep.zip3(self.source, second, third))

    def map(self, func: Callable[[Any], Any]) -> Stream:
        """Apply function to each element."""
        return Stream(map(func, self.source))

    def filter(self, func: Callable[[Any], bool] | None = None) -> Stream:
        """Keep elements where func returns True."""
        return Stream(filter(func, self.source))

    # =========================================================================
    # Terminal operations (consume the stream)
    # =========================================================================

    def nth(self, index: int) -> Option[Any]:
        return consumers.nth(self.source, index)

    def item(self, index: int) -> Any:
        return consumers.item(self.source, index)

    def forall(self, predicate: Callable[[Any], bool]) -> bool:
        return consumers.forall(self.source, predicate)

    def exists(self, predicate: Callable[[Any], bool]) -> bool:
        return consumers.exists(self.source, predicate)

    def iter(self, action: Callable[[Any], Any]) -> None:
        consumers.iter(self.source, action)

    def forall2(self, other: Iterable[Any], predicate: Callable[[Any, Any], bool]) -> bool:
        return lockstep.forall2(self.source, other, predicate)

    def exists2(self, other: Iterable[Any], predicate: Callable[[Any, Any], bool]) -> bool:
        return lockstep.exists2(self.source, other, predicate)

    def iter2(self, other: Iterable[Any], action: Callable[[Any, Any], Any]) -> None:
        lockstep.iter2(self.source, other, action)

    def first(self) -> Option[Any]:
        """Get first element as Some, or Nothing if empty.

        Examples:
            >>> Stream([1, 2, 3]).first()
            Some(value=1)
            >>> Stream([]).first()
            Nothing
        """
        with acquire(self.source, 'first') as it:
            for x in it:
                return Some(x)
        return Nothing

    def to_list(self) -> list[Any]:
        """Collect into list."""
        return list(self.source)

    def __iter__(self) -> Iterator[Any]:
        """Allow direct iteration."""
        return iter(self.source)

    def __repr__(self) -> str:
        return f'Stream({self.source!r})'
