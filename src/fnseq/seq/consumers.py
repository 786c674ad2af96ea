"""Single-source sequence operations.

Lazy transforms (`truncate`, `pairwise`, `windowed`, `collect`) return
generators that pull from the source only as far as the consumer asks.
Lookups and traversals (`nth`, `item`, `forall`, `exists`, `iter`) run
immediately.
"""

from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from fnseq.decorators import requires
from fnseq.errors import InvalidArgumentError
from fnseq.option import Nothing, Option, Some
from fnseq.seq._resources import acquire

__all__ = [
    'collect',
    'exists',
    'forall',
    'item',
    'iter',
    'nth',
    'pairwise',
    'truncate',
    'windowed',
]

_MISSING: Any = object()


@requires('source')
def truncate[T](source: Iterable[T], count: int) -> Iterator[T]:
    """Yield the leading elements of source, stopping after count + 1 of them.

    Note:
        This yields `count + 1` elements, not `count`: `truncate(xs, 0)`
        yields the first element and `truncate(xs, 2)` yields three. The
        behaviour is kept for compatibility with existing callers; use
        `itertools.islice(xs, count)` for an exact prefix. A negative count
        yields nothing.

    A shorter source simply ends the output early. No element after the last
    yielded one is pulled from the source.

    Args:
        source: The sequence to cut.
        count: Index of the last element to yield.

    Yields:
        Elements source[0] .. source[count].

    Example:
        ```python
        list(truncate(range(100), 2))  # [0, 1, 2]
        list(truncate([1], 5))  # [1]
        ```
    """
    if count < 0:
        return
    with acquire(source, 'truncate') as it:
        for index, element in enumerate(it):
            yield element
            if index >= count:
                return


@requires('source')
def pairwise[T](source: Iterable[T]) -> Iterator[tuple[T, T]]:
    """Yield each element paired with its successor.

    Example:
        ```python
        list(pairwise([1, 2, 3]))  # [(1, 2), (2, 3)]
        list(pairwise([1]))  # []
        ```
    """
    with acquire(source, 'pairwise') as it:
        previous = next(it, _MISSING)
        if previous is _MISSING:
            return
        for current in it:
            yield previous, current
            previous = current


@requires('source')
def windowed[T](source: Iterable[T], window_size: int) -> Iterator[list[T]]:
    """Yield sliding windows of window_size consecutive elements.

    The window advances one element at a time. Each yielded window is a new
    list, so mutating one never affects another. A source shorter than
    window_size yields nothing.

    Args:
        source: The sequence to slide over.
        window_size: Number of elements per window, at least 1.

    Returns:
        A lazy iterator of windows.

    Raises:
        InvalidArgumentError: If window_size < 1 (raised at call time).

    Example:
        ```python
        list(windowed([1, 2, 3, 4], 3))  # [[1, 2, 3], [2, 3, 4]]
        ```
    """
    if window_size < 1:
        raise InvalidArgumentError('window_size', f'windowed: window_size must be >= 1, got {window_size}')
    return _windowed(source, window_size)


def _windowed[T](source: Iterable[T], window_size: int) -> Iterator[list[T]]:
    # deque with maxlen is the circular buffer: appending evicts the oldest element
    window: deque[T] = deque(maxlen=window_size)
    with acquire(source, 'windowed') as it:
        for element in it:
            window.append(element)
            if len(window) == window_size:
                yield list(window)


@requires('source', 'func')
def collect[T, R](source: Iterable[T], func: Callable[[T], Iterable[R]]) -> Iterator[R]:
    """Map each element to a sequence and flatten the results lazily.

    Example:
        ```python
        list(collect([1, 2, 3], lambda n: [n] * n))  # [1, 2, 2, 3, 3, 3]
        ```
    """
    with acquire(source, 'collect') as it:
        for element in it:
            yield from func(element)


@requires('source')
def nth[T](source: Iterable[T], index: int) -> Option[T]:
    """Return the element at a 0-based index, or Nothing when out of range.

    Sequences (lists, tuples, ranges, strings) are indexed directly after a
    bounds check. Any other iterable is advanced element by element, and
    only as far as index. Negative indices are out of range; they do not
    count from the end.

    Args:
        source: The sequence to look into.
        index: 0-based position.

    Returns:
        Some(element) if the position exists, otherwise Nothing.

    Example:
        ```python
        nth([10, 20, 30], 1)  # Some(value=20)
        nth([10, 20, 30], 5)  # Nothing
        ```
    """
    if index < 0:
        return Nothing
    if isinstance(source, Sequence):
        return Some(source[index]) if index < len(source) else Nothing
    with acquire(source, 'nth') as it:
        for element in itertools.islice(it, index, index + 1):
            return Some(element)
    return Nothing


@requires('source')
def item[T](source: Iterable[T], index: int) -> T:
    """Return the element at a 0-based index.

    Same lookup as `nth`, but raises instead of returning Nothing.

    Raises:
        IndexError: If index is negative or past the end of source.
    """
    match nth(source, index):
        case Some(element):
            return element
    msg = f'item: index {index} is out of range'
    raise IndexError(msg)


@requires('source', 'predicate')
def forall[T](source: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if predicate holds for every element (True when empty)."""
    with acquire(source, 'forall') as it:
        return all(predicate(element) for element in it)


@requires('source', 'predicate')
def exists[T](source: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if predicate holds for any element (False when empty)."""
    with acquire(source, 'exists') as it:
        return any(predicate(element) for element in it)


@requires('source', 'action')
def iter[T](source: Iterable[T], action: Callable[[T], Any]) -> None:  # noqa: A001
    """Call action on each element, in order, immediately."""
    with acquire(source, 'iter') as it:
        for element in it:
            action(element)
