"""Lockstep traversal of two or three sequences.

Every function stops as soon as any input is exhausted (shortest wins, no
padding). Inputs are pulled left to right on each step, so when a later
input runs out, one extra element has already been taken from the earlier
ones. All upstream iterators are closed when the traversal ends.
"""

from __future__ import annotations

import builtins
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from fnseq.decorators import requires
from fnseq.seq._resources import acquire

__all__ = ['exists2', 'forall2', 'iter2', 'zip', 'zip3']


@requires('first', 'second', 'predicate')
def forall2[T1, T2](
    first: Iterable[T1],
    second: Iterable[T2],
    predicate: Callable[[T1, T2], bool],
) -> bool:
    """Return True if predicate holds for every pair.

    Short-circuits on the first failing pair.

    Example:
        ```python
        forall2([1, 2, 3], [2, 3, 4], lambda a, b: a < b)  # True
        forall2([1, 5], [2, 3, 0], lambda a, b: a < b)  # False
        ```
    """
    with acquire(first, 'forall2') as it1, acquire(second, 'forall2') as it2:
        for a, b in builtins.zip(it1, it2):
            if not predicate(a, b):
                return False
    return True


@requires('first', 'second', 'predicate')
def exists2[T1, T2](
    first: Iterable[T1],
    second: Iterable[T2],
    predicate: Callable[[T1, T2], bool],
) -> bool:
    """Return True if predicate holds for any pair.

    Short-circuits on the first matching pair.
    """
    with acquire(first, 'exists2') as it1, acquire(second, 'exists2') as it2:
        for a, b in builtins.zip(it1, it2):
            if predicate(a, b):
                return True
    return False


@requires('first', 'second', 'action')
def iter2[T1, T2](
    first: Iterable[T1],
    second: Iterable[T2],
    action: Callable[[T1, T2], Any],
) -> None:
    """Call action on each pair, in order, immediately."""
    with acquire(first, 'iter2') as it1, acquire(second, 'iter2') as it2:
        for a, b in builtins.zip(it1, it2):
            action(a, b)


@requires('first', 'second')
def zip[T1, T2](first: Iterable[T1], second: Iterable[T2]) -> Iterator[tuple[T1, T2]]:  # noqa: A001
    """Lazily pair up elements of two sequences.

    Example:
        ```python
        list(zip([1, 2, 3], ['a', 'b']))  # [(1, 'a'), (2, 'b')]
        ```
    """
    with acquire(first, 'zip') as it1, acquire(second, 'zip') as it2:
        yield from builtins.zip(it1, it2)


@requires('first', 'second', 'third')
def zip3[T1, T2, T3](
    first: Iterable[T1],
    second: Iterable[T2],
    third: Iterable[T3],
) -> Iterator[tuple[T1, T2, T3]]:
    """Lazily group elements of three sequences into triples."""
    with acquire(first, 'zip3') as it1, acquire(second, 'zip3') as it2, acquire(third, 'zip3') as it3:
        yield from builtins.zip(it1, it2, it3)
